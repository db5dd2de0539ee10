"""Ordering capabilities.

Each capability derives the rest of the ordering relations from the one or
two relations the host writes itself:

    - less_than_comparable: <=, >=, > from <
    - equality_comparable: != from ==
    - equivalent: == from <
    - partially_ordered: <=, >=, > from < and ==
    - totally_ordered: less_than_comparable + equality_comparable

Heterogeneous forms take the right-hand operand type. The operand-reversed
relations (``u < t`` and friends) need no derivation: Python answers them
through the reflected method of the host (``t > u``).
"""

from __future__ import annotations

from typing import Any

from operable._internal import memoize, validate_operand
from operable.core import Derivation, call_primitive, capability, operand_key


@memoize
def less_than_comparable(operand: Any = None) -> type:
    """Derive <=, >= and > from <.

    Homogeneous form requires ``x < y`` and derives ``x > y`` as ``y < x``,
    ``x <= y`` as ``not y < x`` and ``x >= y`` as ``not x < y``.

    Heterogeneous form requires ``x < u`` and ``x > u`` and derives
    ``x <= u`` as ``not x > u`` and ``x >= u`` as ``not x < u``.

    Args:
        operand: Right-hand operand type, or None for the host type.

    Examples:
        >>> class Version(less_than_comparable()):
        ...     def __init__(self, n): self.n = n
        ...     def __lt__(self, other): return self.n < other.n
        >>> Version(1) >= Version(2)
        False
    """
    validate_operand(operand, capability="less_than_comparable")
    key = operand_key(operand)
    name = "less_than_comparable"

    if operand is None:

        def greater(x: Any, y: Any) -> bool:
            return bool(call_primitive(y, "__lt__", x, derived=">"))

        def less_equal(x: Any, y: Any) -> bool:
            return not call_primitive(y, "__lt__", x, derived="<=")

        def greater_equal(x: Any, y: Any) -> bool:
            return not call_primitive(x, "__lt__", y, derived=">=")

        derivations = (
            Derivation("__gt__", key, greater, name, ">"),
            Derivation("__le__", key, less_equal, name, "<="),
            Derivation("__ge__", key, greater_equal, name, ">="),
        )
    else:

        def less_equal(x: Any, y: Any) -> bool:
            return not call_primitive(x, "__gt__", y, derived="<=")

        def greater_equal(x: Any, y: Any) -> bool:
            return not call_primitive(x, "__lt__", y, derived=">=")

        derivations = (
            Derivation("__le__", key, less_equal, name, "<="),
            Derivation("__ge__", key, greater_equal, name, ">="),
        )

    return capability(name, operand, derivations=derivations)


@memoize
def equality_comparable(operand: Any = None) -> type:
    """Derive != from ==.

    The reversed ``u == x`` and ``u != x`` are answered through reflection.
    """
    validate_operand(operand, capability="equality_comparable")

    def not_equal(x: Any, y: Any) -> bool:
        return not call_primitive(x, "__eq__", y, derived="!=")

    return capability(
        "equality_comparable",
        operand,
        derivations=(
            Derivation(
                "__ne__", operand_key(operand), not_equal, "equality_comparable", "!="
            ),
        ),
    )


@memoize
def equivalent(operand: Any = None) -> type:
    """Derive == from < alone: two values are equal when neither precedes.

    Heterogeneous form also requires ``x > u``. Installing == leaves the
    host unhashable unless it defines ``__hash__`` itself.

    Examples:
        >>> class Word(equivalent()):
        ...     def __init__(self, s): self.s = s
        ...     def __lt__(self, other): return self.s.lower() < other.s.lower()
        >>> Word("Apple") == Word("apple")
        True
    """
    validate_operand(operand, capability="equivalent")

    if operand is None:

        def equal(x: Any, y: Any) -> bool:
            return not call_primitive(x, "__lt__", y, derived="==") and not call_primitive(
                y, "__lt__", x, derived="=="
            )

    else:

        def equal(x: Any, y: Any) -> bool:
            return not call_primitive(x, "__lt__", y, derived="==") and not call_primitive(
                x, "__gt__", y, derived="=="
            )

    return capability(
        "equivalent",
        operand,
        derivations=(Derivation("__eq__", operand_key(operand), equal, "equivalent", "=="),),
    )


@memoize
def partially_ordered(operand: Any = None) -> type:
    """Derive <=, >= and > from < and ==.

    ``x <= y`` is ``x < y or x == y``, so two values that are neither
    ordered nor equal compare False both ways, as a partial order requires.

    Combining this with less_than_comparable for the same operand is
    rejected when the host class is created.
    """
    validate_operand(operand, capability="partially_ordered")
    key = operand_key(operand)
    name = "partially_ordered"

    if operand is None:

        def greater(x: Any, y: Any) -> bool:
            return bool(call_primitive(y, "__lt__", x, derived=">"))

        def less_equal(x: Any, y: Any) -> bool:
            return bool(
                call_primitive(x, "__lt__", y, derived="<=")
                or call_primitive(x, "__eq__", y, derived="<=")
            )

        def greater_equal(x: Any, y: Any) -> bool:
            return bool(
                call_primitive(y, "__lt__", x, derived=">=")
                or call_primitive(x, "__eq__", y, derived=">=")
            )

        derivations = (
            Derivation("__gt__", key, greater, name, ">"),
            Derivation("__le__", key, less_equal, name, "<="),
            Derivation("__ge__", key, greater_equal, name, ">="),
        )
    else:

        def less_equal(x: Any, y: Any) -> bool:
            return bool(
                call_primitive(x, "__lt__", y, derived="<=")
                or call_primitive(x, "__eq__", y, derived="<=")
            )

        def greater_equal(x: Any, y: Any) -> bool:
            return bool(
                call_primitive(x, "__gt__", y, derived=">=")
                or call_primitive(x, "__eq__", y, derived=">=")
            )

        derivations = (
            Derivation("__le__", key, less_equal, name, "<="),
            Derivation("__ge__", key, greater_equal, name, ">="),
        )

    return capability(name, operand, derivations=derivations)


@memoize
def totally_ordered(operand: Any = None) -> type:
    """Full ordering from < and ==: less_than_comparable + equality_comparable."""
    validate_operand(operand, capability="totally_ordered")
    return capability(
        "totally_ordered",
        operand,
        parts=(less_than_comparable(operand), equality_comparable(operand)),
    )


__all__ = [
    "less_than_comparable",
    "equality_comparable",
    "equivalent",
    "partially_ordered",
    "totally_ordered",
]
