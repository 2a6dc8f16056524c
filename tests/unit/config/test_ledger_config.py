"""Unit tests for LedgerConfig.

Tests validation and environment variable loading.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from src.config.ledger_config import (
    ADMIN_PRINCIPAL_ENV,
    ENVIRONMENT_ENV,
    INITIAL_BLOCK_HEIGHT_ENV,
    TEST_LEDGER_CONFIG,
    LedgerConfig,
)

ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


class TestLedgerConfig:
    """Tests for LedgerConfig dataclass."""

    def test_defaults(self) -> None:
        config = LedgerConfig(admin_principal=ADMIN)

        assert config.environment == "production"
        assert config.initial_block_height == 1

    @pytest.mark.parametrize("admin", ["", "   "])
    def test_blank_admin_rejected(self, admin: str) -> None:
        with pytest.raises(ValueError, match="admin_principal must be a non-empty"):
            LedgerConfig(admin_principal=admin)

    def test_unknown_environment_rejected(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            LedgerConfig(admin_principal=ADMIN, environment="staging")

        assert "staging" in str(exc_info.value)

    def test_negative_block_height_rejected(self) -> None:
        with pytest.raises(ValueError, match="initial_block_height"):
            LedgerConfig(admin_principal=ADMIN, initial_block_height=-1)

    def test_config_is_frozen(self) -> None:
        config = LedgerConfig(admin_principal=ADMIN)

        with pytest.raises(AttributeError):
            config.admin_principal = "someone-else"  # type: ignore[misc]

    def test_test_preset(self) -> None:
        assert TEST_LEDGER_CONFIG.admin_principal == ADMIN
        assert TEST_LEDGER_CONFIG.environment == "development"
        assert TEST_LEDGER_CONFIG.initial_block_height == 123


class TestLedgerConfigFromEnvironment:
    """Tests for LedgerConfig.from_environment()."""

    def test_loads_all_values(self) -> None:
        env = {
            ADMIN_PRINCIPAL_ENV: f"  {ADMIN}  ",
            ENVIRONMENT_ENV: "Development",
            INITIAL_BLOCK_HEIGHT_ENV: "500",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LedgerConfig.from_environment()

        assert config.admin_principal == ADMIN
        assert config.environment == "development"
        assert config.initial_block_height == 500

    def test_defaults_when_optional_values_unset(self) -> None:
        with patch.dict(os.environ, {ADMIN_PRINCIPAL_ENV: ADMIN}, clear=True):
            config = LedgerConfig.from_environment()

        assert config.environment == "production"
        assert config.initial_block_height == 1

    def test_invalid_block_height_falls_back_to_default(self) -> None:
        env = {ADMIN_PRINCIPAL_ENV: ADMIN, INITIAL_BLOCK_HEIGHT_ENV: "not-a-number"}
        with patch.dict(os.environ, env, clear=True):
            config = LedgerConfig.from_environment()

        assert config.initial_block_height == 1

    def test_missing_admin_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match=ADMIN_PRINCIPAL_ENV):
                LedgerConfig.from_environment()

    def test_invalid_environment_raises(self) -> None:
        env = {ADMIN_PRINCIPAL_ENV: ADMIN, ENVIRONMENT_ENV: "staging"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError, match="environment must be one of"):
                LedgerConfig.from_environment()
