"""Composite capabilities and algebraic-structure bundles.

Composites are pure unions; they derive nothing themselves. Homogeneous
bundles leave out the reversed capabilities, since ``u op x`` with u of
the host type is just ``x op y``.

Composites:
    - additive: addable + subtractable
    - multiplicative: multipliable + dividable
    - integer_multiplicative: multiplicative + modable
    - arithmetic: additive + multiplicative
    - integer_arithmetic: additive + integer_multiplicative
    - bitwise: xorable + andable + orable
    - shiftable: left_shiftable + right_shiftable
    - unit_steppable: incrementable + decrementable

Algebraic bundles:
    - ring_operators: additive + rsubtractable + multipliable
    - field_operators: ring + dividable + rdividable
    - euclidean_ring_operators: ring + dividable + rdividable + modable + rmodable
    - ordered_*: the bundle + totally_ordered
    - operators: totally_ordered + integer_arithmetic + bitwise
      (+ unit_steppable when homogeneous)
"""

from __future__ import annotations

from typing import Any

from operable._internal import memoize, validate_operand
from operable.access import decrementable, incrementable
from operable.binary import (
    addable,
    andable,
    dividable,
    left_shiftable,
    modable,
    multipliable,
    orable,
    rdividable,
    right_shiftable,
    rmodable,
    rsubtractable,
    subtractable,
    xorable,
)
from operable.core import capability
from operable.ordering import totally_ordered


def _compose(name: str, operand: Any, *parts: type) -> type:
    validate_operand(operand, capability=name)
    return capability(name, operand, parts=parts)


@memoize
def additive(operand: Any = None) -> type:
    """Addition and subtraction."""
    return _compose("additive", operand, addable(operand), subtractable(operand))


@memoize
def multiplicative(operand: Any = None) -> type:
    """Multiplication and division."""
    return _compose(
        "multiplicative", operand, multipliable(operand), dividable(operand)
    )


@memoize
def integer_multiplicative(operand: Any = None) -> type:
    """Multiplication, division and modulo."""
    return _compose(
        "integer_multiplicative", operand, multiplicative(operand), modable(operand)
    )


@memoize
def arithmetic(operand: Any = None) -> type:
    """The four arithmetic operators."""
    return _compose("arithmetic", operand, additive(operand), multiplicative(operand))


@memoize
def integer_arithmetic(operand: Any = None) -> type:
    """The four arithmetic operators and modulo."""
    return _compose(
        "integer_arithmetic",
        operand,
        additive(operand),
        integer_multiplicative(operand),
    )


@memoize
def bitwise(operand: Any = None) -> type:
    """Exclusive or, and, inclusive or."""
    return _compose(
        "bitwise", operand, xorable(operand), andable(operand), orable(operand)
    )


@memoize
def shiftable(operand: Any = None) -> type:
    """Left and right shift."""
    return _compose(
        "shiftable", operand, left_shiftable(operand), right_shiftable(operand)
    )


@memoize
def unit_steppable() -> type:
    """post_increment() and post_decrement()."""
    return capability("unit_steppable", parts=(incrementable(), decrementable()))


@memoize
def ring_operators(operand: Any = None) -> type:
    """Operators of a ring: +, -, * with the operand as a scalar.

    The heterogeneous form also lets the operand stand on the left of a
    subtraction (``u - x``) without assuming division exists.

    Examples:
        >>> class Z(ring_operators()):
        ...     def __init__(self, n): self.n = n
        ...     def __iadd__(self, o): self.n += o.n; return self
        ...     def __isub__(self, o): self.n -= o.n; return self
        ...     def __imul__(self, o): self.n *= o.n; return self
        >>> ((Z(2) + Z(3)) * Z(4) - Z(1)).n
        19
    """
    if operand is None:
        return _compose("ring_operators", None, additive(), multipliable())
    return _compose(
        "ring_operators",
        operand,
        additive(operand),
        rsubtractable(operand),
        multipliable(operand),
    )


@memoize
def ordered_ring_operators(operand: Any = None) -> type:
    """ring_operators + totally_ordered."""
    return _compose(
        "ordered_ring_operators",
        operand,
        ring_operators(operand),
        totally_ordered(operand),
    )


@memoize
def field_operators(operand: Any = None) -> type:
    """Operators of a field: the ring operators plus / and, heterogeneously, u / x."""
    if operand is None:
        return _compose("field_operators", None, ring_operators(), dividable())
    return _compose(
        "field_operators",
        operand,
        ring_operators(operand),
        dividable(operand),
        rdividable(operand),
    )


@memoize
def ordered_field_operators(operand: Any = None) -> type:
    """field_operators + totally_ordered."""
    return _compose(
        "ordered_field_operators",
        operand,
        field_operators(operand),
        totally_ordered(operand),
    )


@memoize
def euclidean_ring_operators(operand: Any = None) -> type:
    """Operators of a Euclidean ring: the ring operators plus division with remainder.

    Heterogeneous forms also derive ``u / x`` and ``u % x``.
    """
    if operand is None:
        return _compose(
            "euclidean_ring_operators",
            None,
            ring_operators(),
            dividable(),
            modable(),
        )
    return _compose(
        "euclidean_ring_operators",
        operand,
        ring_operators(operand),
        dividable(operand),
        rdividable(operand),
        modable(operand),
        rmodable(operand),
    )


@memoize
def ordered_euclidean_ring_operators(operand: Any = None) -> type:
    """euclidean_ring_operators + totally_ordered."""
    return _compose(
        "ordered_euclidean_ring_operators",
        operand,
        totally_ordered(operand),
        euclidean_ring_operators(operand),
    )


# Historical spellings of the same capabilities
euclidian_ring_operators = euclidean_ring_operators
ordered_euclidian_ring_operators = ordered_euclidean_ring_operators


@memoize
def operators(operand: Any = None) -> type:
    """Everything a number-like type usually needs, from one declaration.

    totally_ordered + integer_arithmetic + bitwise, and unit_steppable when
    the operand is the host type.
    """
    if operand is None:
        return _compose(
            "operators",
            None,
            totally_ordered(),
            integer_arithmetic(),
            bitwise(),
            unit_steppable(),
        )
    return _compose(
        "operators",
        operand,
        totally_ordered(operand),
        integer_arithmetic(operand),
        bitwise(operand),
    )


__all__ = [
    "additive",
    "multiplicative",
    "integer_multiplicative",
    "arithmetic",
    "integer_arithmetic",
    "bitwise",
    "shiftable",
    "unit_steppable",
    "ring_operators",
    "ordered_ring_operators",
    "field_operators",
    "ordered_field_operators",
    "euclidean_ring_operators",
    "ordered_euclidean_ring_operators",
    "euclidian_ring_operators",
    "ordered_euclidian_ring_operators",
    "operators",
]
