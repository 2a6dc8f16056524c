"""Unit tests for the Principal value object."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from src.domain.models.principal import Principal


class TestPrincipal:
    """Tests for Principal construction, equality and ordering."""

    def test_equal_addresses_are_equal(self) -> None:
        """Two principals with the same address compare equal."""
        assert Principal("ST1") == Principal("ST1")
        assert hash(Principal("ST1")) == hash(Principal("ST1"))

    def test_different_addresses_are_not_equal(self) -> None:
        assert Principal("ST1") != Principal("ST2")

    def test_totally_ordered(self) -> None:
        """Principals sort by address so they can key ordered maps."""
        principals = [Principal("ST3"), Principal("ST1"), Principal("ST2")]
        assert sorted(principals) == [Principal("ST1"), Principal("ST2"), Principal("ST3")]

    def test_str_is_address(self) -> None:
        assert str(Principal("ST1PQHQ")) == "ST1PQHQ"

    @pytest.mark.parametrize("address", ["", "   "])
    def test_empty_address_rejected(self, address: str) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            Principal(address)

    def test_is_immutable(self) -> None:
        principal = Principal("ST1")
        with pytest.raises(FrozenInstanceError):
            principal.address = "ST2"  # type: ignore[misc]
