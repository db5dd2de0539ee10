"""Stepping and access capabilities.

Python has no ``++``, ``--``, unary ``*`` or ``->``. Hosts express them
through a small method protocol instead:

    increment()    pre-increment, mutates in place, returns self
    decrement()    pre-decrement, mutates in place, returns self
    dereference()  the value the handle refers to

From these the capabilities derive:

    - incrementable: post_increment()
    - decrementable: post_decrement()
    - dereferenceable: arrow() and attribute forwarding
    - subscriptable: x[n] as (x + n).dereference()
"""

from __future__ import annotations

from typing import Any

from operable._internal import memoize, validate_required_operand
from operable._internal.constants import DECREMENT, DEREFERENCE, INCREMENT
from operable.core import Derivation, call_primitive, capability, duplicate
from operable.errors import MissingPrimitiveError


@memoize
def incrementable() -> type:
    """Derive post_increment() from increment().

    Examples:
        >>> class Counter(incrementable()):
        ...     def __init__(self, n): self.n = n
        ...     def increment(self):
        ...         self.n += 1
        ...         return self
        >>> c = Counter(4)
        >>> c.post_increment().n, c.n
        (4, 5)
    """

    def post_increment(x: Any) -> Any:
        previous = duplicate(x)
        call_primitive(x, INCREMENT, derived="post_increment")
        return previous

    return capability(
        "incrementable",
        derivations=(
            Derivation("post_increment", None, post_increment, "incrementable", "x++"),
        ),
    )


@memoize
def decrementable() -> type:
    """Derive post_decrement() from decrement()."""

    def post_decrement(x: Any) -> Any:
        previous = duplicate(x)
        call_primitive(x, DECREMENT, derived="post_decrement")
        return previous

    return capability(
        "decrementable",
        derivations=(
            Derivation("post_decrement", None, post_decrement, "decrementable", "x--"),
        ),
    )


@memoize
def dereferenceable(pointer: Any = None) -> type:
    """Derive member access through dereference().

    ``arrow()`` returns the referred value, and public attributes the
    handle does not have itself are looked up on that value, so
    ``handle.name`` reads ``handle.dereference().name``. Private and dunder
    names are never forwarded. Every missed lookup dereferences; when that
    fails (an end position, say) the lookup raises AttributeError chained
    to the failure, so ``hasattr`` answers False.

    Args:
        pointer: Type recorded as the handle's pointer type; metadata only.
    """

    def arrow(x: Any) -> Any:
        return call_primitive(x, DEREFERENCE, derived="->")

    def forward_attribute(x: Any, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(
                f"{type(x).__name__!r} object has no attribute {name!r}"
            )
        try:
            target = call_primitive(x, DEREFERENCE, derived="->")
        except MissingPrimitiveError:
            raise
        except Exception as exc:
            raise AttributeError(
                f"{type(x).__name__!r} object has no attribute {name!r} "
                f"(dereference failed: {exc!r})"
            ) from exc
        return getattr(target, name)

    return capability(
        "dereferenceable",
        derivations=(
            Derivation("arrow", None, arrow, "dereferenceable", "->"),
            Derivation("__getattr__", None, forward_attribute, "dereferenceable", "->"),
        ),
        namespace={"_arrow_pointer": pointer},
    )


@memoize
def subscriptable(index: Any = int, result: Any = None) -> type:
    """Derive ``x[n]`` as ``(x + n).dereference()``.

    Requires ``x + n`` for the index type, typically derived by
    ``addable(index)``, and dereference() on the sum.

    Args:
        index: Type of the subscript.
        result: Type recorded as the subscript's result; metadata only.
    """
    validate_required_operand(index, capability="subscriptable")

    def item(x: Any, n: Any) -> Any:
        moved = call_primitive(x, "__add__", n, derived="[]")
        return call_primitive(moved, DEREFERENCE, derived="[]")

    return capability(
        "subscriptable",
        index,
        derivations=(Derivation("__getitem__", index, item, "subscriptable", "[]"),),
        namespace={"_subscript_result": result},
    )


__all__ = [
    "incrementable",
    "decrementable",
    "dereferenceable",
    "subscriptable",
]
