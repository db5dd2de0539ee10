"""Iterator capabilities.

This module provides capabilities and algorithms for custom iterators:
    - Category tags: InputIteratorTag ... RandomAccessIteratorTag
    - Concept bundles: input_iteratable ... random_access_iteratable
    - Metadata: iterator_helper
    - Helpers: input_iterator_helper ... random_access_iterator_helper
    - Traversal: iterator_traits, advance, distance, traverse
"""

from __future__ import annotations

from operable.iterators.concepts import (
    BidirectionalIteratorTag,
    ForwardIteratorTag,
    InputIteratorTag,
    IteratorTag,
    OutputIteratorTag,
    RandomAccessIteratorTag,
    bidirectional_iteratable,
    bidirectional_iterator_helper,
    forward_iteratable,
    forward_iterator_helper,
    input_iteratable,
    input_iterator_helper,
    iterator_helper,
    output_iteratable,
    output_iterator_helper,
    random_access_iteratable,
    random_access_iterator_helper,
)
from operable.iterators.traversal import (
    IteratorTraits,
    advance,
    distance,
    iterator_traits,
    traverse,
)

__all__: list[str] = [
    # Category tags
    "IteratorTag",
    "InputIteratorTag",
    "OutputIteratorTag",
    "ForwardIteratorTag",
    "BidirectionalIteratorTag",
    "RandomAccessIteratorTag",
    # Concept bundles
    "input_iteratable",
    "output_iteratable",
    "forward_iteratable",
    "bidirectional_iteratable",
    "random_access_iteratable",
    # Metadata and helpers
    "iterator_helper",
    "input_iterator_helper",
    "output_iterator_helper",
    "forward_iterator_helper",
    "bidirectional_iterator_helper",
    "random_access_iterator_helper",
    # Traversal
    "IteratorTraits",
    "iterator_traits",
    "advance",
    "distance",
    "traverse",
]
