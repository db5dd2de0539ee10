"""Operable: derive a full operator surface from a few primitives.

A value type writes a canonical handful of operations (``<``, ``==``,
``+=``, ``increment()``...) and lists capabilities among its bases; the
capabilities derive every conventionally expected operation from them.

Ordering:
    less_than_comparable, equality_comparable, equivalent,
    partially_ordered, totally_ordered

Arithmetic (one per operator, derived from the in-place form):
    addable, subtractable, multipliable, dividable, floor_dividable,
    modable, xorable, andable, orable, left_shiftable, right_shiftable

Reversed (opt-in ``u op x`` for non-commutative operators):
    rsubtractable, rdividable, rfloor_dividable, rmodable,
    rleft_shiftable, rright_shiftable

Access:
    incrementable, decrementable, dereferenceable, subscriptable

Composites and algebraic bundles:
    additive, multiplicative, integer_multiplicative, arithmetic,
    integer_arithmetic, bitwise, shiftable, unit_steppable,
    ring_operators, ordered_ring_operators, field_operators,
    ordered_field_operators, euclidean_ring_operators,
    ordered_euclidean_ring_operators, operators

Iterators:
    input/output/forward/bidirectional/random_access iteratable bundles,
    the matching *_iterator_helper bundles, iterator_helper metadata,
    and advance, distance, traverse

Exceptions:
    OperableError: Base exception
    MissingPrimitiveError: A derived operation lacks its primitive
    DuplicateDerivationError: Two capabilities derive the same operation
    ValidationError: Invalid capability parameters

Example:
    >>> from operable import additive, less_than_comparable
    >>> class Vec2(additive(), less_than_comparable()):
    ...     def __init__(self, x, y): self.x, self.y = x, y
    ...     def __iadd__(self, o):
    ...         self.x += o.x
    ...         self.y += o.y
    ...         return self
    ...     def __isub__(self, o):
    ...         self.x -= o.x
    ...         self.y -= o.y
    ...         return self
    ...     def __lt__(self, o): return (self.x, self.y) < (o.x, o.y)
    >>> v = Vec2(1, 2) + Vec2(3, 4)
    >>> (v.x, v.y), Vec2(2, 0) <= Vec2(1, 2)
    ((4, 6), False)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Machinery
from operable.core import SELF, Derivable, Derivation

# Ordering
from operable.ordering import (
    equality_comparable,
    equivalent,
    less_than_comparable,
    partially_ordered,
    totally_ordered,
)

# Arithmetic
from operable.binary import (
    addable,
    andable,
    dividable,
    floor_dividable,
    left_shiftable,
    modable,
    multipliable,
    orable,
    rdividable,
    rfloor_dividable,
    right_shiftable,
    rleft_shiftable,
    rmodable,
    rright_shiftable,
    rsubtractable,
    subtractable,
    xorable,
)

# Access
from operable.access import (
    decrementable,
    dereferenceable,
    incrementable,
    subscriptable,
)

# Composites and algebraic bundles
from operable.algebra import (
    additive,
    arithmetic,
    bitwise,
    euclidean_ring_operators,
    euclidian_ring_operators,
    field_operators,
    integer_arithmetic,
    integer_multiplicative,
    multiplicative,
    operators,
    ordered_euclidean_ring_operators,
    ordered_euclidian_ring_operators,
    ordered_field_operators,
    ordered_ring_operators,
    ring_operators,
    shiftable,
    unit_steppable,
)

# Iterators
from operable.iterators import (
    BidirectionalIteratorTag,
    ForwardIteratorTag,
    InputIteratorTag,
    IteratorTag,
    IteratorTraits,
    OutputIteratorTag,
    RandomAccessIteratorTag,
    advance,
    bidirectional_iteratable,
    bidirectional_iterator_helper,
    distance,
    forward_iteratable,
    forward_iterator_helper,
    input_iteratable,
    input_iterator_helper,
    iterator_helper,
    iterator_traits,
    output_iteratable,
    output_iterator_helper,
    random_access_iteratable,
    random_access_iterator_helper,
    traverse,
)

# Introspection
from operable.inspection import capability_names, derivations

# Exceptions
from operable.errors import (
    DuplicateDerivationError,
    MissingPrimitiveError,
    OperableError,
    ValidationError,
)

__all__: list[str] = [
    "__version__",
    # Machinery
    "SELF",
    "Derivable",
    "Derivation",
    # Ordering
    "less_than_comparable",
    "equality_comparable",
    "equivalent",
    "partially_ordered",
    "totally_ordered",
    # Arithmetic
    "addable",
    "subtractable",
    "multipliable",
    "dividable",
    "floor_dividable",
    "modable",
    "xorable",
    "andable",
    "orable",
    "left_shiftable",
    "right_shiftable",
    "rsubtractable",
    "rdividable",
    "rfloor_dividable",
    "rmodable",
    "rleft_shiftable",
    "rright_shiftable",
    # Access
    "incrementable",
    "decrementable",
    "dereferenceable",
    "subscriptable",
    # Composites and algebraic bundles
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
    # Iterators
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
    "IteratorTraits",
    "iterator_traits",
    "advance",
    "distance",
    "traverse",
    # Introspection
    "derivations",
    "capability_names",
    # Exceptions
    "OperableError",
    "MissingPrimitiveError",
    "DuplicateDerivationError",
    "ValidationError",
]
