"""Capability mixins and the machinery that installs derived operations.

A capability is a mixin class built by :func:`capability`. It carries no
methods of its own, only a tuple of :class:`Derivation` records. When a
host class lists capabilities among its bases, ``Derivable.__init_subclass__``
gathers the derivations of every capability in the host's MRO and installs
them on the host:

    - Operations taking a right-hand operand are grouped by name. One
      dispatching method per name selects the derivation by the operand's
      type. A method the host wrote itself under that name stays reachable
      for every operand type no capability covers.
    - Operations without an operand (``post_increment``, ``arrow``...) are
      installed as plain methods unless the host already defines them.

The homogeneous placeholder :data:`SELF` is bound to the class that adopted
the capability, so subclasses of an adopter keep comparing against the
adopter's type.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

from operable._internal.constants import (
    COMMUTATIVE_OPERATORS,
    COMPARISON_SYMBOLS,
    NON_COMMUTATIVE_OPERATORS,
)
from operable.errors import DuplicateDerivationError

logger = logging.getLogger(__name__)

# Dunders for which Python treats NotImplemented as "try the other operand"
_OPERATOR_DUNDERS: frozenset[str] = frozenset(COMPARISON_SYMBOLS).union(
    name
    for operator in COMMUTATIVE_OPERATORS + NON_COMMUTATIVE_OPERATORS
    for name in (operator.forward, operator.reflected)
)


class _SelfType:
    """Placeholder for the primary type in homogeneous derivations."""

    _instance: _SelfType | None = None

    def __new__(cls) -> _SelfType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SELF"

    def __reduce__(self) -> str:
        return "SELF"


SELF = _SelfType()


@dataclass(frozen=True)
class Derivation:
    """One derived operation contributed by a capability.

    Attributes:
        name: Attribute installed on the host, e.g. "__le__" or "post_increment".
        operand: Right-hand operand type, tuple of types, SELF, or None
            for operations that take no operand.
        function: The implementation, called as ``function(self, *args)``.
        capability: Name of the capability that declares it.
        symbol: The derived operation as written in source, e.g. "<=".
    """

    name: str
    operand: Any
    function: Callable[..., Any]
    capability: str
    symbol: str

    def __post_init__(self) -> None:
        self.function.__name__ = self.name
        self.function._operable_derivation = self  # type: ignore[attr-defined]

    @property
    def dispatched(self) -> bool:
        """True if the operation is selected by its operand type."""
        return self.operand is not None

    @property
    def homogeneous(self) -> bool:
        """True if the operand is the primary type itself."""
        return self.operand is SELF


class Derivable:
    """Root of every capability mixin.

    Subclassing a capability runs the installer. Hosts never need to
    name this class, but it may be used for isinstance checks.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if is_capability(cls):
            return
        if not any(is_capability(base) for base in cls.__bases__):
            return
        _install(cls)


def is_capability(obj: Any) -> bool:
    """Return True if obj is a capability mixin class."""
    return isinstance(obj, type) and "_capability_name" in obj.__dict__


def capability(
    name: str,
    operand: Any = None,
    *,
    parts: Sequence[type] = (),
    derivations: Sequence[Derivation] = (),
    namespace: dict[str, Any] | None = None,
) -> type:
    """Build a capability mixin class.

    Args:
        name: Capability name, e.g. "addable".
        operand: Secondary type, or None for the homogeneous form.
        parts: Capabilities this one is composed of.
        derivations: Operations this capability derives itself.
        namespace: Extra class attributes, e.g. iterator metadata.

    Returns:
        A new mixin class deriving from ``parts`` (or from Derivable).
    """
    body: dict[str, Any] = {
        "__slots__": (),
        "__module__": "operable",
        "_capability_name": name,
        "_capability_operand": operand,
        "_capability_derivations": tuple(derivations),
    }
    if namespace:
        body.update(namespace)
    bases = tuple(parts) or (Derivable,)
    return type(_class_name(name, operand), bases, body)


def operand_key(operand: Any) -> Any:
    """Map a factory's operand argument to a Derivation operand."""
    return SELF if operand is None else operand


def _class_name(name: str, operand: Any) -> str:
    if operand is None:
        return name
    if isinstance(operand, tuple):
        return f"{name}[{', '.join(item.__name__ for item in operand)}]"
    return f"{name}[{getattr(operand, '__name__', operand)!s}]"


def iter_capabilities(cls: type) -> Iterator[type]:
    """Yield the capability mixins in cls's MRO, most derived first."""
    for klass in cls.__mro__:
        if is_capability(klass):
            yield klass


def _adopter(cls: type, mixin: type) -> type:
    # Least derived host class in the MRO that inherits the mixin
    for klass in reversed(cls.__mro__):
        if klass is object or is_capability(klass):
            continue
        if issubclass(klass, mixin):
            return klass
    return cls


def _operand_types(operand: Any) -> tuple[Any, ...]:
    if isinstance(operand, tuple):
        return operand
    return (operand,)


def bind(cls: type) -> list[Derivation]:
    """Resolve the derivations cls receives from its capabilities.

    SELF operands are bound to the adopting class and tuple operands are
    split, giving one record per (name, operand type).

    Raises:
        DuplicateDerivationError: If two different derivations claim the
            same name for the same operand type.
    """
    seen: dict[tuple[str, Any], Derivation] = {}
    bound: list[Derivation] = []
    for mixin in iter_capabilities(cls):
        for derivation in mixin.__dict__["_capability_derivations"]:
            operand = derivation.operand
            if operand is SELF:
                operand = _adopter(cls, mixin)
            for operand_type in _operand_types(operand):
                key = (derivation.name, operand_type)
                previous = seen.get(key)
                if previous is None:
                    seen[key] = derivation
                    bound.append(dataclasses.replace(derivation, operand=operand_type))
                elif previous is not derivation:
                    raise DuplicateDerivationError(
                        cls,
                        derivation.symbol,
                        operand_type,
                        (previous.capability, derivation.capability),
                    )
    return bound


def _host_attribute(cls: type, name: str) -> Any:
    # The host-written definition of name, ignoring installed derivations
    for klass in cls.__mro__:
        if klass is object or is_capability(klass):
            continue
        attribute = klass.__dict__.get(name)
        if attribute is None:
            continue
        if getattr(attribute, "_operable_dispatcher", False):
            return attribute._operable_primitive
        if hasattr(attribute, "_operable_derivation"):
            continue
        return attribute
    return None


def _dispatcher(
    cls: type,
    name: str,
    entries: list[Derivation],
    primitive: Callable[..., Any] | None,
) -> Callable[..., Any]:
    exact: dict[Any, Callable[..., Any]] = {}
    ordered: list[tuple[Any, Callable[..., Any]]] = []
    for derivation in entries:
        exact.setdefault(derivation.operand, derivation.function)
        ordered.append((derivation.operand, derivation.function))

    def dispatch(self: Any, other: Any) -> Any:
        function = exact.get(type(other))
        if function is None:
            for operand, candidate in ordered:
                if isinstance(other, operand):
                    function = candidate
                    break
            else:
                if primitive is not None:
                    return primitive(self, other)
                if name in _OPERATOR_DUNDERS:
                    return NotImplemented
                raise TypeError(
                    f"{type(self).__name__}.{name} does not accept "
                    f"{type(other).__name__!r}"
                )
        return function(self, other)

    dispatch.__name__ = name
    dispatch.__qualname__ = f"{cls.__qualname__}.{name}"
    dispatch._operable_dispatcher = True  # type: ignore[attr-defined]
    dispatch._operable_primitive = primitive  # type: ignore[attr-defined]
    dispatch._operable_entries = tuple(entries)  # type: ignore[attr-defined]
    return dispatch


def _install(cls: type) -> None:
    bound = bind(cls)

    grouped: dict[str, list[Derivation]] = {}
    for derivation in bound:
        grouped.setdefault(derivation.name, []).append(derivation)

    for name, entries in grouped.items():
        if not entries[0].dispatched:
            if _host_attribute(cls, name) is None:
                setattr(cls, name, entries[0].function)
            continue
        setattr(cls, name, _dispatcher(cls, name, entries, _host_attribute(cls, name)))
        if name == "__eq__" and _host_attribute(cls, "__hash__") is None:
            # Value equality without a matching hash
            cls.__hash__ = None  # type: ignore[assignment]

    cls._operable_derivations = tuple(bound)  # type: ignore[attr-defined]
    logger.debug(
        "installed %d derived operations on %s from %s",
        len(bound),
        cls.__qualname__,
        ", ".join(mixin.__name__ for mixin in iter_capabilities(cls)),
    )


__all__ = [
    "SELF",
    "Derivation",
    "Derivable",
    "bind",
    "capability",
    "is_capability",
    "iter_capabilities",
    "operand_key",
]
