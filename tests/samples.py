"""Sample host types shared by the tests.

Each type writes only the primitives its capabilities require.
"""

from __future__ import annotations

from typing import Any

from operable import (
    additive,
    bitwise,
    forward_iteratable,
    forward_iterator_helper,
    less_than_comparable,
    operators,
    ordered_euclidean_ring_operators,
    ordered_field_operators,
    output_iterator_helper,
    random_access_iterator_helper,
    shiftable,
)


class Vec2(additive(), less_than_comparable()):
    """2D vector with += and -=, ordered lexicographically."""

    __slots__ = ("x", "y")

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Vec2({self.x}, {self.y})"


def _magnitude(value: Any) -> float:
    return value.value if isinstance(value, Meters) else value


class Meters(ordered_field_operators(), ordered_field_operators(float)):
    """Length in meters, interoperating with plain floats."""

    __slots__ = ("value",)

    def __init__(self, value: Any = 0.0) -> None:
        self.value = float(_magnitude(value))

    def __iadd__(self, other: Any) -> Meters:
        self.value += _magnitude(other)
        return self

    def __isub__(self, other: Any) -> Meters:
        self.value -= _magnitude(other)
        return self

    def __imul__(self, other: Any) -> Meters:
        self.value *= _magnitude(other)
        return self

    def __itruediv__(self, other: Any) -> Meters:
        self.value /= _magnitude(other)
        return self

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, (Meters, float)):
            return NotImplemented
        return self.value < _magnitude(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, (Meters, float)):
            return NotImplemented
        return self.value > _magnitude(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (Meters, float)):
            return NotImplemented
        return self.value == _magnitude(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Meters({self.value})"


class Whole(ordered_euclidean_ring_operators(), ordered_euclidean_ring_operators(int)):
    """Integer with truncating division, mixing with plain ints."""

    __slots__ = ("n",)

    def __init__(self, n: Any = 0) -> None:
        self.n = n.n if isinstance(n, Whole) else int(n)

    @staticmethod
    def _int(other: Any) -> int:
        return other.n if isinstance(other, Whole) else other

    def __iadd__(self, other: Any) -> Whole:
        self.n += self._int(other)
        return self

    def __isub__(self, other: Any) -> Whole:
        self.n -= self._int(other)
        return self

    def __imul__(self, other: Any) -> Whole:
        self.n *= self._int(other)
        return self

    def __itruediv__(self, other: Any) -> Whole:
        self.n //= self._int(other)
        return self

    def __imod__(self, other: Any) -> Whole:
        self.n %= self._int(other)
        return self

    def __lt__(self, other: Any) -> bool:
        return self.n < self._int(other)

    def __gt__(self, other: Any) -> bool:
        return self.n > self._int(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (Whole, int)):
            return NotImplemented
        return self.n == self._int(other)

    def __hash__(self) -> int:
        return hash(self.n)

    def __repr__(self) -> str:
        return f"Whole({self.n})"


class Bits(bitwise(), shiftable(int)):
    """Bit set over an int mask."""

    __slots__ = ("mask",)

    def __init__(self, mask: int = 0) -> None:
        self.mask = mask

    def __ixor__(self, other: Bits) -> Bits:
        self.mask ^= other.mask
        return self

    def __iand__(self, other: Bits) -> Bits:
        self.mask &= other.mask
        return self

    def __ior__(self, other: Bits) -> Bits:
        self.mask |= other.mask
        return self

    def __ilshift__(self, count: int) -> Bits:
        self.mask <<= count
        return self

    def __irshift__(self, count: int) -> Bits:
        self.mask >>= count
        return self


class Number(operators()):
    """Integer wrapper equipped through the maximal bundle."""

    __slots__ = ("n",)

    def __init__(self, n: int = 0) -> None:
        self.n = n

    def __iadd__(self, other: Number) -> Number:
        self.n += other.n
        return self

    def __isub__(self, other: Number) -> Number:
        self.n -= other.n
        return self

    def __imul__(self, other: Number) -> Number:
        self.n *= other.n
        return self

    def __itruediv__(self, other: Number) -> Number:
        self.n //= other.n
        return self

    def __imod__(self, other: Number) -> Number:
        self.n %= other.n
        return self

    def __ixor__(self, other: Number) -> Number:
        self.n ^= other.n
        return self

    def __iand__(self, other: Number) -> Number:
        self.n &= other.n
        return self

    def __ior__(self, other: Number) -> Number:
        self.n |= other.n
        return self

    def __lt__(self, other: Number) -> bool:
        return self.n < other.n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self.n == other.n

    def __hash__(self) -> int:
        return hash(self.n)

    def increment(self) -> Number:
        self.n += 1
        return self

    def decrement(self) -> Number:
        self.n -= 1
        return self


class Cursor(forward_iteratable()):
    """Minimal forward iterator: ==, increment() and dereference() only."""

    def __init__(self, items: list[Any], index: int = 0) -> None:
        self.items = items
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.items is other.items and self.index == other.index

    def increment(self) -> Cursor:
        self.index += 1
        return self

    def dereference(self) -> Any:
        return self.items[self.index]


class ListCursor(forward_iterator_helper(object)):
    """Forward iterator over a list, with metadata."""

    def __init__(self, items: list[Any], index: int = 0) -> None:
        self.items = items
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self.items is other.items and self.index == other.index

    def increment(self) -> ListCursor:
        self.index += 1
        return self

    def dereference(self) -> Any:
        return self.items[self.index]


class ArrayCursor(random_access_iterator_helper(object)):
    """Random-access iterator over a list."""

    def __init__(self, items: list[Any], index: int = 0) -> None:
        self.items = items
        self.index = index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayCursor):
            return NotImplemented
        return self.items is other.items and self.index == other.index

    def __lt__(self, other: ArrayCursor) -> bool:
        return self.index < other.index

    def __iadd__(self, offset: int) -> ArrayCursor:
        self.index += offset
        return self

    def __isub__(self, offset: int) -> ArrayCursor:
        self.index -= offset
        return self

    def __sub__(self, other: object) -> int:
        if not isinstance(other, ArrayCursor):
            return NotImplemented
        return self.index - other.index

    def increment(self) -> ArrayCursor:
        self.index += 1
        return self

    def decrement(self) -> ArrayCursor:
        self.index -= 1
        return self

    def dereference(self) -> Any:
        return self.items[self.index]


class Collector(output_iterator_helper()):
    """Output iterator appending every written value to a list."""

    def __init__(self, sink: list[Any]) -> None:
        self.sink = sink

    def put(self, value: Any) -> Collector:
        self.sink.append(value)
        return self
