"""Capability machinery.

This module provides the building blocks every capability is made of:
    - Derivable: Root class whose subclass hook installs derivations
    - Derivation: Record of one derived operation
    - SELF: Placeholder for the primary type in homogeneous forms
    - capability: Builder for capability mixin classes
    - call_primitive, duplicate, convert: Access to host primitives
"""

from __future__ import annotations

from operable.core.capability import (
    SELF,
    Derivable,
    Derivation,
    bind,
    capability,
    is_capability,
    iter_capabilities,
    operand_key,
)
from operable.core.primitives import call_primitive, convert, duplicate

__all__: list[str] = [
    "SELF",
    "Derivable",
    "Derivation",
    "bind",
    "call_primitive",
    "capability",
    "convert",
    "duplicate",
    "is_capability",
    "iter_capabilities",
    "operand_key",
]
