"""Generic traversal over iterators that carry metadata.

These functions read an iterator's category from its metadata and pick
the cheapest way to move it:

    - iterator_traits: The five associated types of an iterator
    - advance: Move an iterator by n positions
    - distance: Number of increments from first to last
    - traverse: Yield every value in [first, last)
"""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple

from operable._internal.constants import DECREMENT, DEREFERENCE, INCREMENT, ITERATOR_METADATA
from operable.core import call_primitive, duplicate
from operable.errors import ValidationError
from operable.iterators.concepts import BidirectionalIteratorTag, RandomAccessIteratorTag


class IteratorTraits(NamedTuple):
    """Associated types of an iterator."""

    iterator_category: Any
    value_type: Any
    difference_type: Any
    pointer: Any
    reference: Any


def iterator_traits(obj: Any) -> IteratorTraits:
    """Return the metadata of an iterator or iterator class.

    Args:
        obj: An iterator instance or class.

    Returns:
        The five associated types.

    Raises:
        ValidationError: If the class does not declare iterator metadata.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    try:
        values = [getattr(cls, name) for name in ITERATOR_METADATA]
    except AttributeError as exc:
        raise ValidationError(f"{cls.__name__} declares no iterator metadata") from exc
    return IteratorTraits(*values)


def advance(it: Any, n: int) -> Any:
    """Move ``it`` by ``n`` positions and return it.

    Random-access iterators jump with ``+=``; any other category steps
    with increment(), or decrement() for negative n.

    Raises:
        ValidationError: If n is negative and the iterator is not bidirectional.
    """
    category = iterator_traits(it).iterator_category
    if issubclass(category, RandomAccessIteratorTag):
        return call_primitive(it, "__iadd__", n, derived="advance")
    if n < 0:
        if not issubclass(category, BidirectionalIteratorTag):
            raise ValidationError(
                f"cannot move a {category.__name__} iterator backwards"
            )
        for _ in range(-n):
            call_primitive(it, DECREMENT, derived="advance")
        return it
    for _ in range(n):
        call_primitive(it, INCREMENT, derived="advance")
    return it


def distance(first: Any, last: Any) -> Any:
    """Return the number of increments that take ``first`` to ``last``.

    Random-access iterators answer with ``last - first``. Other categories
    count steps on a copy of first, so first itself does not move.
    """
    category = iterator_traits(first).iterator_category
    if issubclass(category, RandomAccessIteratorTag):
        return call_primitive(last, "__sub__", first, derived="distance")
    current = duplicate(first)
    count = 0
    while current != last:
        call_primitive(current, INCREMENT, derived="distance")
        count += 1
    return count


def traverse(first: Any, last: Any) -> Iterator[Any]:
    """Yield the value at every position from ``first`` up to, not including, ``last``.

    Uses only ``!=``, post_increment() and dereference(), so any input
    iterator qualifies. first is copied and never moved.

    Examples:
        >>> from operable.iterators.concepts import forward_iterator_helper
        >>> class Cursor(forward_iterator_helper(int)):
        ...     def __init__(self, items, i=0): self.items, self.i = items, i
        ...     def __eq__(self, other): return self.i == other.i
        ...     def increment(self):
        ...         self.i += 1
        ...         return self
        ...     def dereference(self): return self.items[self.i]
        >>> data = [1, 2, 3]
        >>> list(traverse(Cursor(data), Cursor(data, 3)))
        [1, 2, 3]
    """
    current = duplicate(first)
    while current != last:
        position = call_primitive(current, "post_increment", derived="traverse")
        yield call_primitive(position, DEREFERENCE, derived="traverse")


__all__ = [
    "IteratorTraits",
    "iterator_traits",
    "advance",
    "distance",
    "traverse",
]
