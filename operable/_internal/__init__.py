"""Internal utilities for Operable.

This module contains private implementation details:
    - Operator protocol tables
    - Factory memoization
    - Parameter validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from operable._internal.decorators import memoize
from operable._internal.validation import (
    validate_category,
    validate_operand,
    validate_required_operand,
)

__all__: list[str] = [
    "memoize",
    "validate_category",
    "validate_operand",
    "validate_required_operand",
]
