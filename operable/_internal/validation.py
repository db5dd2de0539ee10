"""Validation utilities for Operable.

This module checks the type parameters handed to capability factories.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Any

from operable.errors import ValidationError


def validate_operand(operand: Any, *, capability: str) -> None:
    """Validate a secondary operand type.

    None means the homogeneous form and is always accepted.

    Args:
        operand: A type, a non-empty tuple of types, or None.
        capability: Name of the capability, used in the error message.

    Raises:
        ValidationError: If operand is anything else.

    Examples:
        >>> validate_operand(float, capability="addable")
        >>> validate_operand((int, float), capability="addable")
        >>> validate_operand(3, capability="addable")
        Traceback (most recent call last):
        ...
        operable.errors.ValidationError: addable operand must be a type or a tuple of types, got 3
    """
    if operand is None or isinstance(operand, type):
        return
    if (
        isinstance(operand, tuple)
        and operand
        and all(isinstance(item, type) for item in operand)
    ):
        return
    raise ValidationError(
        f"{capability} operand must be a type or a tuple of types, got {operand!r}"
    )


def validate_required_operand(operand: Any, *, capability: str) -> None:
    """Validate the operand of a capability that has no homogeneous form.

    Raises:
        ValidationError: If operand is None or not a type.
    """
    if operand is None:
        raise ValidationError(f"{capability} requires an explicit operand type")
    validate_operand(operand, capability=capability)


def validate_category(category: Any, base: type) -> None:
    """Validate an iterator category tag.

    Args:
        category: The tag class to check.
        base: The tag root every category must derive from.

    Raises:
        ValidationError: If category is not a subclass of base.
    """
    if not (isinstance(category, type) and issubclass(category, base)):
        raise ValidationError(
            f"iterator category must be a {base.__name__} subclass, got {category!r}"
        )


__all__ = [
    "validate_operand",
    "validate_required_operand",
    "validate_category",
]
