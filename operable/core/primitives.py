"""Invocation of the primitive operations a host type supplies.

Derived operations never go through the operator syntax to reach their
primitives. ``x < y`` would let Python fall back to the reflected
``y > x``, which may itself be derived from ``<`` and recurse forever.
Instead the primitive dunder is looked up on the host type and called
directly, and anything short of a real result is reported as a
MissingPrimitiveError at the call site of the derived operation.
"""

from __future__ import annotations

import copy as _copy
from typing import Any

from operable._internal.constants import symbol_for
from operable.errors import MissingPrimitiveError

# object supplies these, but only as placeholders
_OBJECT_DEFAULTS: dict[str, Any] = {
    name: getattr(object, name)
    for name in ("__eq__", "__ne__", "__lt__", "__le__", "__gt__", "__ge__")
}


def call_primitive(obj: Any, name: str, *args: Any, derived: str | None = None) -> Any:
    """Call the primitive ``name`` of ``obj``'s type.

    Args:
        obj: The receiver.
        name: Dunder or protocol method name, e.g. "__iadd__" or "increment".
        *args: Operands passed after the receiver.
        derived: Symbol of the derived operation that needs the primitive.

    Returns:
        Whatever the primitive returns.

    Raises:
        MissingPrimitiveError: If the type does not define the primitive,
            inherits only the object placeholder, or the primitive returns
            NotImplemented for the operand.

    Examples:
        >>> call_primitive([1], "__iadd__", [2])
        [1, 2]
    """
    host = type(obj)
    method = getattr(host, name, None)
    if method is None or method is _OBJECT_DEFAULTS.get(name):
        raise MissingPrimitiveError(
            host,
            symbol_for(name),
            derived=derived,
            operand=type(args[0]) if args else None,
        )
    result = method(obj, *args)
    if result is NotImplemented:
        raise MissingPrimitiveError(
            host,
            symbol_for(name),
            derived=derived,
            operand=type(args[0]) if args else None,
            detail="returned NotImplemented",
        )
    return result


def duplicate(obj: Any) -> Any:
    """Return a copy of ``obj`` suitable for mutating in place.

    Uses ``copy.copy``, which is shallow: a list or dict held by obj is
    shared with the copy. Hosts whose in-place primitives mutate such
    state must define ``__copy__`` with value semantics, or ``x + y``
    changes x. Iterators rely on the shallow default to keep sharing
    their sequence.
    """
    return _copy.copy(obj)


def convert(value: Any, target: type, derived: str | None = None) -> Any:
    """Convert ``value`` to ``target`` by calling the target type.

    Raises:
        MissingPrimitiveError: If the target type cannot be built from value.
    """
    try:
        return target(value)
    except (TypeError, ValueError) as exc:
        raise MissingPrimitiveError(
            target,
            f"{target.__name__}({type(value).__name__})",
            derived=derived,
            detail=str(exc),
        ) from exc


__all__ = [
    "call_primitive",
    "convert",
    "duplicate",
]
