"""Arithmetic and bitwise operator capabilities.

Every binary operator is derived the same way: ``x op y`` copies x,
applies the compound assignment ``op=`` with y to the copy and returns the
result. The only primitive a host writes is the in-place dunder
(``__iadd__``, ``__isub__``...), and it must accept the operand type.

Commutative families (+ * ^ & |):
    Heterogeneous forms also derive ``u op x`` (the reflected dunder) by
    copying x and applying ``op=`` with u. Nothing checks that the host's
    operation really commutes.

Non-commutative families (- / // % << >>):
    Only ``x op u`` is derived. ``u op x`` needs the matching reversed
    capability (rsubtractable, rdividable...), which converts u to the host
    type with ``Host(u)`` before applying ``op=``.

Homogeneous forms derive the single non-reflected dunder.

Each derivation costs one copy of the left operand, made with
``copy.copy``. The copy is shallow, so a host whose ``op=`` mutates a
held container in place must define ``__copy__`` copying that container;
otherwise ``x op y`` also changes x.
"""

from __future__ import annotations

from typing import Any, Callable

from operable._internal import memoize, validate_operand, validate_required_operand
from operable._internal.constants import (
    ADD,
    AND,
    FLOORDIV,
    LSHIFT,
    MOD,
    MUL,
    OR,
    RSHIFT,
    SUB,
    TRUEDIV,
    XOR,
    BinaryOperator,
)
from operable.core import (
    Derivation,
    call_primitive,
    capability,
    convert,
    duplicate,
    operand_key,
)


def _copy_and_apply(operator: BinaryOperator) -> Callable[[Any, Any], Any]:
    def derived(x: Any, y: Any) -> Any:
        return call_primitive(duplicate(x), operator.inplace, y, derived=operator.symbol)

    return derived


def _convert_and_apply(operator: BinaryOperator) -> Callable[[Any, Any], Any]:
    # Called as x.__rop__(u) for u op x
    def derived(x: Any, u: Any) -> Any:
        result = convert(u, type(x), derived=operator.symbol)
        return call_primitive(result, operator.inplace, x, derived=operator.symbol)

    return derived


def binary_capability(
    operator: BinaryOperator,
    name: str,
    operand: Any,
    *,
    commutative: bool,
) -> type:
    """Build the capability deriving ``operator`` from its in-place form.

    Args:
        operator: Protocol names of the operator.
        name: Capability name.
        operand: Right-hand operand type, or None for the host type.
        commutative: Whether heterogeneous forms also derive ``u op x``.

    Returns:
        The capability mixin.
    """
    validate_operand(operand, capability=name)
    key = operand_key(operand)
    derivations = [
        Derivation(operator.forward, key, _copy_and_apply(operator), name, operator.symbol)
    ]
    if commutative and operand is not None:
        derivations.append(
            Derivation(
                operator.reflected,
                key,
                _copy_and_apply(operator),
                name,
                f"{operator.symbol} (reflected)",
            )
        )
    return capability(name, operand, derivations=derivations)


def reversed_capability(operator: BinaryOperator, name: str, operand: Any) -> type:
    """Build the opt-in capability deriving ``u op x`` for a non-commutative operator.

    Raises:
        ValidationError: If operand is None; reversal has no homogeneous form.
    """
    validate_required_operand(operand, capability=name)
    return capability(
        name,
        operand,
        derivations=(
            Derivation(
                operator.reflected,
                operand,
                _convert_and_apply(operator),
                name,
                f"{operator.symbol} (reflected)",
            ),
        ),
    )


# Commutative families


@memoize
def addable(operand: Any = None) -> type:
    """Derive ``x + y`` (and ``u + x`` when heterogeneous) from ``__iadd__``.

    Examples:
        >>> class Tally(addable(int)):
        ...     def __init__(self, n): self.n = n
        ...     def __iadd__(self, k):
        ...         self.n += k
        ...         return self
        >>> (Tally(1) + 2).n, (2 + Tally(1)).n
        (3, 3)
    """
    return binary_capability(ADD, "addable", operand, commutative=True)


@memoize
def multipliable(operand: Any = None) -> type:
    """Derive ``x * y`` (and ``u * x`` when heterogeneous) from ``__imul__``."""
    return binary_capability(MUL, "multipliable", operand, commutative=True)


@memoize
def xorable(operand: Any = None) -> type:
    """Derive ``x ^ y`` (and ``u ^ x`` when heterogeneous) from ``__ixor__``."""
    return binary_capability(XOR, "xorable", operand, commutative=True)


@memoize
def andable(operand: Any = None) -> type:
    """Derive ``x & y`` (and ``u & x`` when heterogeneous) from ``__iand__``."""
    return binary_capability(AND, "andable", operand, commutative=True)


@memoize
def orable(operand: Any = None) -> type:
    """Derive ``x | y`` (and ``u | x`` when heterogeneous) from ``__ior__``."""
    return binary_capability(OR, "orable", operand, commutative=True)


# Non-commutative families


@memoize
def subtractable(operand: Any = None) -> type:
    """Derive ``x - y`` from ``__isub__``."""
    return binary_capability(SUB, "subtractable", operand, commutative=False)


@memoize
def dividable(operand: Any = None) -> type:
    """Derive ``x / y`` from ``__itruediv__``."""
    return binary_capability(TRUEDIV, "dividable", operand, commutative=False)


@memoize
def floor_dividable(operand: Any = None) -> type:
    """Derive ``x // y`` from ``__ifloordiv__``."""
    return binary_capability(FLOORDIV, "floor_dividable", operand, commutative=False)


@memoize
def modable(operand: Any = None) -> type:
    """Derive ``x % y`` from ``__imod__``."""
    return binary_capability(MOD, "modable", operand, commutative=False)


@memoize
def left_shiftable(operand: Any = None) -> type:
    """Derive ``x << y`` from ``__ilshift__``."""
    return binary_capability(LSHIFT, "left_shiftable", operand, commutative=False)


@memoize
def right_shiftable(operand: Any = None) -> type:
    """Derive ``x >> y`` from ``__irshift__``."""
    return binary_capability(RSHIFT, "right_shiftable", operand, commutative=False)


# Reversed capabilities


@memoize
def rsubtractable(operand: Any) -> type:
    """Derive ``u - x`` as ``Host(u) -= x``.

    Examples:
        >>> class Gap(rsubtractable(int)):
        ...     def __init__(self, n): self.n = n
        ...     def __isub__(self, other):
        ...         self.n -= other.n
        ...         return self
        >>> (10 - Gap(3)).n
        7
    """
    return reversed_capability(SUB, "rsubtractable", operand)


@memoize
def rdividable(operand: Any) -> type:
    """Derive ``u / x`` as ``Host(u) /= x``."""
    return reversed_capability(TRUEDIV, "rdividable", operand)


@memoize
def rfloor_dividable(operand: Any) -> type:
    """Derive ``u // x`` as ``Host(u) //= x``."""
    return reversed_capability(FLOORDIV, "rfloor_dividable", operand)


@memoize
def rmodable(operand: Any) -> type:
    """Derive ``u % x`` as ``Host(u) %= x``."""
    return reversed_capability(MOD, "rmodable", operand)


@memoize
def rleft_shiftable(operand: Any) -> type:
    """Derive ``u << x`` as ``Host(u) <<= x``."""
    return reversed_capability(LSHIFT, "rleft_shiftable", operand)


@memoize
def rright_shiftable(operand: Any) -> type:
    """Derive ``u >> x`` as ``Host(u) >>= x``."""
    return reversed_capability(RSHIFT, "rright_shiftable", operand)


__all__ = [
    "binary_capability",
    "reversed_capability",
    "addable",
    "multipliable",
    "xorable",
    "andable",
    "orable",
    "subtractable",
    "dividable",
    "floor_dividable",
    "modable",
    "left_shiftable",
    "right_shiftable",
    "rsubtractable",
    "rdividable",
    "rfloor_dividable",
    "rmodable",
    "rleft_shiftable",
    "rright_shiftable",
]
