"""Tests for the operable.core module.

This test module verifies:
    - Capability mixins carry no state
    - SELF binding to the adopting class
    - Dispatch between derivations and host-written methods
    - Duplicate detection at class creation
    - Re-installation for subclasses adding capabilities
"""

from __future__ import annotations

import copy
import logging
import pickle
from typing import Any

import pytest

from operable import (
    SELF,
    Derivable,
    Derivation,
    DuplicateDerivationError,
    addable,
    less_than_comparable,
    multipliable,
)
from operable.core import bind, capability, is_capability, iter_capabilities
from samples import Vec2


# =============================================================================
# Mixins
# =============================================================================


class TestMixins:
    """Tests for capability mixin classes."""

    def test_zero_storage(self) -> None:
        """Capabilities add no per-instance storage."""
        assert Derivable.__slots__ == ()
        for mixin in iter_capabilities(Vec2):
            assert mixin.__dict__["__slots__"] == ()
        assert not hasattr(Vec2(1, 2), "__dict__")

    def test_is_capability(self) -> None:
        """Mixins are capabilities; hosts and the root are not."""
        assert is_capability(addable())
        assert not is_capability(Vec2)
        assert not is_capability(Derivable)
        assert not is_capability(addable)

    def test_class_name(self) -> None:
        """Mixin names show the operand."""
        assert addable().__name__ == "addable"
        assert addable(float).__name__ == "addable[float]"
        assert addable((int, float)).__name__ == "addable[int, float]"

    def test_hosts_are_derivable(self) -> None:
        """Every host is a Derivable."""
        assert isinstance(Vec2(), Derivable)

    def test_custom_capability(self) -> None:
        """capability() builds mixins from hand-written derivations."""

        def negated_less(x: Any, y: Any) -> bool:
            return not x < y

        custom = capability(
            "not_less",
            derivations=(Derivation("is_not_less", SELF, negated_less, "not_less", "!<"),),
        )

        class Score(custom):
            def __init__(self, n: int) -> None:
                self.n = n

            def __lt__(self, other: Score) -> bool:
                return self.n < other.n

        assert Score(3).is_not_less(Score(2)) is True
        assert Score(1).is_not_less(Score(2)) is False


# =============================================================================
# SELF binding
# =============================================================================


class TestSelfBinding:
    """Tests for homogeneous operands bound to the adopter."""

    def test_sentinel(self) -> None:
        """SELF is a singleton that survives copying and pickling."""
        assert repr(SELF) == "SELF"
        assert copy.deepcopy(SELF) is SELF
        assert pickle.loads(pickle.dumps(SELF)) is SELF

    def test_bound_to_adopter(self) -> None:
        """Homogeneous derivations target the adopting class."""
        operands = {d.operand for d in Vec2._operable_derivations}
        assert operands == {Vec2}

    def test_subclass_keeps_adopter(self) -> None:
        """A subclass adding capabilities keeps earlier bindings."""

        class Scaled(Vec2, multipliable(int)):
            __slots__ = ()

            def __imul__(self, k: int) -> Scaled:
                self.x *= k
                self.y *= k
                return self

        by_name = {(d.name, d.operand) for d in Scaled._operable_derivations}
        assert ("__add__", Vec2) in by_name
        assert ("__mul__", int) in by_name
        assert ("__rmul__", int) in by_name

        result = Scaled(1, 2) * 3 + Vec2(1, 1)
        assert type(result) is Scaled
        assert result == Vec2(4, 7)
        assert 2 * Scaled(1, 1) == Vec2(2, 2)
        assert Scaled(1, 2) <= Vec2(1, 2)

    def test_plain_subclass_inherits(self) -> None:
        """A subclass adding nothing inherits the dispatchers unchanged."""

        class Point(Vec2):
            __slots__ = ()

        assert "__add__" not in Point.__dict__
        assert Point(1, 1) + Point(2, 2) == Vec2(3, 3)


# =============================================================================
# Dispatch
# =============================================================================


class Money(addable(), addable(int)):
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def __iadd__(self, other: Any) -> Money:
        self.cents += other.cents if isinstance(other, Money) else other
        return self

    def __add__(self, other: Any) -> Any:
        if isinstance(other, str):
            return f"{self.cents}{other}"
        return NotImplemented


class TestDispatch:
    """Tests for selecting a derivation by operand type."""

    def test_derivations_by_type(self) -> None:
        """Money + Money and Money + int each use their derivation."""
        assert (Money(1) + Money(2)).cents == 3
        assert (Money(1) + 2).cents == 3
        assert (2 + Money(1)).cents == 3

    def test_host_method_for_other_types(self) -> None:
        """The host's own __add__ handles operands no capability covers."""
        assert Money(5) + "c" == "5c"

    def test_host_method_not_implemented(self) -> None:
        """The host's NotImplemented propagates to Python's protocol."""
        with pytest.raises(TypeError):
            Money(5) + 1.5  # noqa: B018

    def test_dispatcher_metadata(self) -> None:
        """Installed dispatchers are named after the dunder."""
        assert Money.__add__.__name__ == "__add__"
        assert Money.__add__.__qualname__.endswith("Money.__add__")


# =============================================================================
# Duplicates
# =============================================================================


class TestDuplicates:
    """Tests for ambiguous derivations."""

    def test_overlapping_tuple_operand(self) -> None:
        """Two capabilities covering the same operand type conflict."""
        with pytest.raises(DuplicateDerivationError) as excinfo:

            class Clash(addable((int, float)), addable(int)):
                pass

        assert excinfo.value.name == "+"
        assert excinfo.value.operand is int
        assert "ambiguous derivation" in str(excinfo.value)

    def test_distinct_operands_coexist(self) -> None:
        """Different operand types do not conflict."""
        assert Money(1) is not None

    def test_bind_reports_without_installing(self) -> None:
        """bind() resolves derivations of an existing host."""
        names = sorted({d.name for d in bind(Vec2)})
        assert names == ["__add__", "__ge__", "__gt__", "__le__", "__sub__"]


# =============================================================================
# Logging
# =============================================================================


class TestLogging:
    """Tests for installation logging."""

    def test_install_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Installing derivations emits one DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="operable.core.capability"):

            class Ordered(less_than_comparable()):
                def __lt__(self, other: Ordered) -> bool:
                    return False

        records = [r for r in caplog.records if r.name == "operable.core.capability"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "Ordered" in records[0].getMessage()
