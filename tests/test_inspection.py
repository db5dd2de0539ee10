"""Tests for the operable.inspection module."""

from __future__ import annotations

import pytest

from operable import (
    SELF,
    ValidationError,
    additive,
    addable,
    capability_names,
    derivations,
    totally_ordered,
)
from samples import Meters, Vec2


class TestDerivations:
    """Tests for derivations()."""

    def test_capability_declared(self) -> None:
        """A mixin reports its declared derivations, SELF unbound."""
        declared = derivations(additive())
        assert [d.name for d in declared] == ["__add__", "__sub__"]
        assert all(d.operand is SELF for d in declared)
        assert all(d.homogeneous for d in declared)

    def test_heterogeneous_declared(self) -> None:
        """The commutative heterogeneous form declares the reflected dunder."""
        declared = derivations(addable(float))
        assert [(d.name, d.operand) for d in declared] == [
            ("__add__", float),
            ("__radd__", float),
        ]
        assert not any(d.homogeneous for d in declared)

    def test_host_installed(self) -> None:
        """A host reports what was installed on it, SELF bound."""
        installed = derivations(Vec2)
        assert {d.operand for d in installed} == {Vec2}
        assert derivations(Vec2(1, 2)) == installed

    def test_symbols_and_sources(self) -> None:
        """Each record names its source capability and symbol."""
        by_name = {d.name: d for d in derivations(Vec2)}
        assert by_name["__le__"].capability == "less_than_comparable"
        assert by_name["__le__"].symbol == "<="
        assert by_name["__sub__"].capability == "subtractable"

    def test_requires_capabilities(self) -> None:
        """Objects without capabilities are rejected."""
        with pytest.raises(ValidationError):
            derivations(int)


class TestCapabilityNames:
    """Tests for capability_names()."""

    def test_composite(self) -> None:
        """A composite lists itself and its parts."""
        assert capability_names(totally_ordered()) == (
            "totally_ordered",
            "less_than_comparable",
            "equality_comparable",
        )

    def test_host(self) -> None:
        """A host lists every capability it adopted."""
        names = capability_names(Meters)
        assert names.count("ordered_field_operators") == 2
        assert "rsubtractable" in names

    def test_requires_capabilities(self) -> None:
        """Objects without capabilities are rejected."""
        with pytest.raises(ValidationError):
            capability_names("plain")
