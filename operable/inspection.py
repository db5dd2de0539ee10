"""Introspection of capabilities and the hosts that adopt them.

    - derivations: The derived operations a capability declares or a host received
    - capability_names: The capabilities composed into a capability or host
"""

from __future__ import annotations

from typing import Any

from operable.core import Derivation, is_capability, iter_capabilities
from operable.errors import ValidationError


def _as_class(obj: Any) -> type:
    cls = obj if isinstance(obj, type) else type(obj)
    if next(iter_capabilities(cls), None) is None:
        raise ValidationError(f"{cls.__name__} adopts no capabilities")
    return cls


def derivations(obj: Any) -> tuple[Derivation, ...]:
    """Return the derived operations of a capability or host.

    For a capability mixin these are the declared derivations of the
    capability and every capability it is composed of, with SELF still
    standing for the host type. For a host class or instance these are the
    derivations installed on it, with SELF bound and tuple operands split.

    Raises:
        ValidationError: If obj involves no capability.

    Examples:
        >>> from operable.binary import addable
        >>> [d.name for d in derivations(addable(float))]
        ['__add__', '__radd__']
        >>> [d.name for d in derivations(addable())]
        ['__add__']
    """
    cls = _as_class(obj)
    if not is_capability(cls):
        installed: tuple[Derivation, ...] = getattr(cls, "_operable_derivations", ())
        return installed
    declared: list[Derivation] = []
    for mixin in iter_capabilities(cls):
        declared.extend(mixin.__dict__["_capability_derivations"])
    return tuple(declared)


def capability_names(obj: Any) -> tuple[str, ...]:
    """Return the names of the capabilities in a capability or host, in MRO order.

    Raises:
        ValidationError: If obj involves no capability.
    """
    cls = _as_class(obj)
    return tuple(mixin.__dict__["_capability_name"] for mixin in iter_capabilities(cls))


__all__ = [
    "derivations",
    "capability_names",
]
