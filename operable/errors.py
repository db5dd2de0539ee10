"""Operable exception hierarchy.

All Operable-specific exceptions inherit from OperableError.
"""

from __future__ import annotations

from typing import Any, Sequence


def _type_name(obj: Any) -> str:
    if isinstance(obj, tuple):
        return "(" + ", ".join(_type_name(item) for item in obj) + ")"
    return getattr(obj, "__name__", repr(obj))


class OperableError(Exception):
    """Base exception for all Operable errors."""

    pass


class MissingPrimitiveError(OperableError, TypeError):
    """A derived operation ran without its required primitive.

    Raised lazily, when the derived operation is invoked, never when the
    capability is adopted.

    Examples:
        - Calling ``a - b`` on a type adopting subtractable() with no ``__isub__``
        - ``__iadd__`` returning NotImplemented for the operand type
        - A reversed capability unable to convert its left operand
    """

    def __init__(
        self,
        host: type,
        primitive: str,
        derived: str | None = None,
        operand: Any = None,
        detail: str | None = None,
    ) -> None:
        self.host = host
        self.primitive = primitive
        self.derived = derived
        self.operand = operand
        message = f"{_type_name(host)} does not provide {primitive!r}"
        if operand is not None:
            message += f" for operand {_type_name(operand)}"
        if derived is not None:
            message += f", required by derived {derived!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class DuplicateDerivationError(OperableError, TypeError):
    """Two capabilities derive the same operation for the same operand.

    Raised when the host class is created.

    Examples:
        - partially_ordered() and less_than_comparable() on one class
    """

    def __init__(
        self,
        host: type,
        name: str,
        operand: Any,
        capabilities: Sequence[str],
    ) -> None:
        self.host = host
        self.name = name
        self.operand = operand
        self.capabilities = tuple(capabilities)
        super().__init__(
            f"ambiguous derivation of {name!r} for {_type_name(host)} "
            f"with operand {_type_name(operand)}: provided by "
            + " and ".join(self.capabilities)
        )


class ValidationError(OperableError, ValueError):
    """Invalid capability parameters.

    Examples:
        - An operand that is neither a type nor a tuple of types
        - A reversed capability requested without an operand type
        - Reading iterator metadata from a class that declares none
    """

    pass


__all__ = [
    "OperableError",
    "MissingPrimitiveError",
    "DuplicateDerivationError",
    "ValidationError",
]
