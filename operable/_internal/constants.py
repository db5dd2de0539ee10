"""Internal constants for Operable.

These tables name the Python operator protocol for every binary operator
the library knows how to derive. This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple


class BinaryOperator(NamedTuple):
    """Protocol names for one binary operator.

    Attributes:
        symbol: The operator as written in source, e.g. "+".
        forward: The dunder called for ``x op y``.
        reflected: The dunder called on the right operand for ``y op x``.
        inplace: The compound-assignment dunder for ``x op= y``.
    """

    symbol: str
    forward: str
    reflected: str
    inplace: str


ADD = BinaryOperator("+", "__add__", "__radd__", "__iadd__")
SUB = BinaryOperator("-", "__sub__", "__rsub__", "__isub__")
MUL = BinaryOperator("*", "__mul__", "__rmul__", "__imul__")
TRUEDIV = BinaryOperator("/", "__truediv__", "__rtruediv__", "__itruediv__")
FLOORDIV = BinaryOperator("//", "__floordiv__", "__rfloordiv__", "__ifloordiv__")
MOD = BinaryOperator("%", "__mod__", "__rmod__", "__imod__")
XOR = BinaryOperator("^", "__xor__", "__rxor__", "__ixor__")
AND = BinaryOperator("&", "__and__", "__rand__", "__iand__")
OR = BinaryOperator("|", "__or__", "__ror__", "__ior__")
LSHIFT = BinaryOperator("<<", "__lshift__", "__rlshift__", "__ilshift__")
RSHIFT = BinaryOperator(">>", "__rshift__", "__rrshift__", "__irshift__")

# Operators for which x op y == y op x is assumed
COMMUTATIVE_OPERATORS: tuple[BinaryOperator, ...] = (ADD, MUL, XOR, AND, OR)

NON_COMMUTATIVE_OPERATORS: tuple[BinaryOperator, ...] = (
    SUB,
    TRUEDIV,
    FLOORDIV,
    MOD,
    LSHIFT,
    RSHIFT,
)

# Comparison dunders and their source symbols
COMPARISON_SYMBOLS: dict[str, str] = {
    "__lt__": "<",
    "__le__": "<=",
    "__gt__": ">",
    "__ge__": ">=",
    "__eq__": "==",
    "__ne__": "!=",
}

# Method protocol standing in for the C-family unary operators
INCREMENT: str = "increment"
DECREMENT: str = "decrement"
DEREFERENCE: str = "dereference"

# Iterator metadata attribute names, in declaration order
ITERATOR_METADATA: tuple[str, ...] = (
    "iterator_category",
    "value_type",
    "difference_type",
    "pointer",
    "reference",
)


def symbol_for(name: str) -> str:
    """Return the source symbol for a dunder, or the name itself.

    Examples:
        >>> symbol_for("__iadd__")
        '+='
        >>> symbol_for("__le__")
        '<='
        >>> symbol_for("increment")
        'increment'
    """
    if name in COMPARISON_SYMBOLS:
        return COMPARISON_SYMBOLS[name]
    for operator in COMMUTATIVE_OPERATORS + NON_COMMUTATIVE_OPERATORS:
        if name in (operator.forward, operator.reflected):
            return operator.symbol
        if name == operator.inplace:
            return operator.symbol + "="
    return name


__all__ = [
    "BinaryOperator",
    "ADD",
    "SUB",
    "MUL",
    "TRUEDIV",
    "FLOORDIV",
    "MOD",
    "XOR",
    "AND",
    "OR",
    "LSHIFT",
    "RSHIFT",
    "COMMUTATIVE_OPERATORS",
    "NON_COMMUTATIVE_OPERATORS",
    "COMPARISON_SYMBOLS",
    "INCREMENT",
    "DECREMENT",
    "DEREFERENCE",
    "ITERATOR_METADATA",
    "symbol_for",
]
