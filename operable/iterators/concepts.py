"""Iterator concept bundles and iterator metadata.

A custom iterator (a position in some sequence, not a Python iterator)
writes ``==``, ``increment()`` and ``dereference()``; the concept bundles
derive the rest of the operator surface for its category, and the helper
bundles add the five metadata attributes generic traversal reads.

Category tags form a hierarchy, so ``issubclass(category, ForwardIteratorTag)``
holds for bidirectional and random-access iterators too.
"""

from __future__ import annotations

from typing import Any

from operable._internal import memoize, validate_category
from operable.access import (
    decrementable,
    dereferenceable,
    incrementable,
    subscriptable,
)
from operable.algebra import additive
from operable.core import capability
from operable.ordering import equality_comparable, less_than_comparable


class IteratorTag:
    """Root of the iterator category tags."""


class InputIteratorTag(IteratorTag):
    """Single-pass, read-only traversal."""


class OutputIteratorTag(IteratorTag):
    """Single-pass, write-only traversal."""


class ForwardIteratorTag(InputIteratorTag):
    """Multi-pass traversal in one direction."""


class BidirectionalIteratorTag(ForwardIteratorTag):
    """Multi-pass traversal in both directions."""


class RandomAccessIteratorTag(BidirectionalIteratorTag):
    """Constant-time jumps by any distance."""


# Concept bundles


@memoize
def input_iteratable(pointer: Any = None) -> type:
    """!=, post_increment() and member access from ==, increment() and dereference()."""
    return capability(
        "input_iteratable",
        parts=(equality_comparable(), incrementable(), dereferenceable(pointer)),
    )


@memoize
def output_iteratable() -> type:
    """post_increment() from increment(); writing needs no comparison."""
    return capability("output_iteratable", parts=(incrementable(),))


@memoize
def forward_iteratable(pointer: Any = None) -> type:
    """Same primitives as input_iteratable; the multi-pass promise is the host's."""
    return capability("forward_iteratable", parts=(input_iteratable(pointer),))


@memoize
def bidirectional_iteratable(pointer: Any = None) -> type:
    """forward_iteratable plus post_decrement() from decrement()."""
    return capability(
        "bidirectional_iteratable",
        parts=(forward_iteratable(pointer), decrementable()),
    )


@memoize
def random_access_iteratable(
    pointer: Any = None,
    difference: Any = int,
    reference: Any = None,
) -> type:
    """bidirectional_iteratable plus ordering, offset arithmetic and subscripts.

    Ordering comes from less_than_comparable rather than totally_ordered,
    since equality is already part of the bidirectional bundle. Requires
    ``<``, ``__iadd__`` and ``__isub__`` taking the difference type.
    """
    return capability(
        "random_access_iteratable",
        parts=(
            bidirectional_iteratable(pointer),
            less_than_comparable(),
            additive(difference),
            subscriptable(difference, reference),
        ),
    )


# Metadata


@memoize
def iterator_helper(
    category: Any,
    value_type: Any,
    difference_type: Any = int,
    pointer: Any = None,
    reference: Any = None,
) -> type:
    """Declare the five associated types of an iterator.

    Contributes no operators, only the class attributes
    ``iterator_category``, ``value_type``, ``difference_type``, ``pointer``
    and ``reference``.

    Raises:
        ValidationError: If category is not an IteratorTag subclass.
    """
    validate_category(category, IteratorTag)
    return capability(
        "iterator_helper",
        namespace={
            "iterator_category": category,
            "value_type": value_type,
            "difference_type": difference_type,
            "pointer": pointer,
            "reference": reference,
        },
    )


# Helpers: concept bundle + metadata


@memoize
def input_iterator_helper(
    value_type: Any,
    difference_type: Any = int,
    pointer: Any = None,
    reference: Any = None,
) -> type:
    """Operators and metadata of an input iterator."""
    return capability(
        "input_iterator_helper",
        parts=(
            input_iteratable(pointer),
            iterator_helper(
                InputIteratorTag, value_type, difference_type, pointer, reference
            ),
        ),
    )


def _itself(x: Any) -> Any:
    return x


@memoize
def output_iterator_helper() -> type:
    """Operators and metadata of a self-proxying output iterator.

    ``dereference()`` and ``increment()`` both return the iterator itself,
    so writes go through a method of the iterator, e.g.
    ``it.post_increment().dereference().put(value)``. The value, difference,
    pointer and reference types are None.
    """
    return capability(
        "output_iterator_helper",
        parts=(
            output_iteratable(),
            iterator_helper(OutputIteratorTag, None, None, None, None),
        ),
        namespace={"dereference": _itself, "increment": _itself},
    )


@memoize
def forward_iterator_helper(
    value_type: Any,
    difference_type: Any = int,
    pointer: Any = None,
    reference: Any = None,
) -> type:
    """Operators and metadata of a forward iterator.

    Examples:
        >>> class Cursor(forward_iterator_helper(str)):
        ...     def __init__(self, items, i=0): self.items, self.i = items, i
        ...     def __eq__(self, other): return self.i == other.i
        ...     def increment(self):
        ...         self.i += 1
        ...         return self
        ...     def dereference(self): return self.items[self.i]
        >>> c = Cursor("ab")
        >>> c.post_increment().dereference(), c.dereference(), c.upper()
        ('a', 'b', 'B')
    """
    return capability(
        "forward_iterator_helper",
        parts=(
            forward_iteratable(pointer),
            iterator_helper(
                ForwardIteratorTag, value_type, difference_type, pointer, reference
            ),
        ),
    )


@memoize
def bidirectional_iterator_helper(
    value_type: Any,
    difference_type: Any = int,
    pointer: Any = None,
    reference: Any = None,
) -> type:
    """Operators and metadata of a bidirectional iterator."""
    return capability(
        "bidirectional_iterator_helper",
        parts=(
            bidirectional_iteratable(pointer),
            iterator_helper(
                BidirectionalIteratorTag,
                value_type,
                difference_type,
                pointer,
                reference,
            ),
        ),
    )


@memoize
def random_access_iterator_helper(
    value_type: Any,
    difference_type: Any = int,
    pointer: Any = None,
    reference: Any = None,
) -> type:
    """Operators and metadata of a random-access iterator."""
    return capability(
        "random_access_iterator_helper",
        parts=(
            random_access_iteratable(pointer, difference_type, reference),
            iterator_helper(
                RandomAccessIteratorTag,
                value_type,
                difference_type,
                pointer,
                reference,
            ),
        ),
    )


__all__ = [
    "IteratorTag",
    "InputIteratorTag",
    "OutputIteratorTag",
    "ForwardIteratorTag",
    "BidirectionalIteratorTag",
    "RandomAccessIteratorTag",
    "input_iteratable",
    "output_iteratable",
    "forward_iteratable",
    "bidirectional_iteratable",
    "random_access_iteratable",
    "iterator_helper",
    "input_iterator_helper",
    "output_iterator_helper",
    "forward_iterator_helper",
    "bidirectional_iterator_helper",
    "random_access_iterator_helper",
]
