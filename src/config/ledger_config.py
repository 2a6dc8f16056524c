"""Credential ledger configuration.

This module defines the ledger's startup configuration with environment
variable overrides.

Environment Variables:
- LEDGER_ADMIN_PRINCIPAL: Admin principal address (required outside tests)
- LEDGER_ENVIRONMENT: "production" (JSON logs) or "development" (console logs)
- LEDGER_INITIAL_BLOCK_HEIGHT: Starting height of the stub block counter (default: 1)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ADMIN_PRINCIPAL_ENV = "LEDGER_ADMIN_PRINCIPAL"
ENVIRONMENT_ENV = "LEDGER_ENVIRONMENT"
INITIAL_BLOCK_HEIGHT_ENV = "LEDGER_INITIAL_BLOCK_HEIGHT"

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class LedgerConfig:
    """Configuration for a credential ledger instance.

    The admin principal is fixed for the life of the ledger; there is no
    operation that reassigns it.

    Attributes:
        admin_principal: Address of the single admin principal.
        environment: Logging mode ("production" or "development").
        initial_block_height: Starting value of the stub timestamp source.
    """

    admin_principal: str
    environment: str = "production"
    initial_block_height: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.admin_principal or not self.admin_principal.strip():
            raise ValueError("admin_principal must be a non-empty string")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.initial_block_height < 0:
            raise ValueError(
                f"initial_block_height must be non-negative, "
                f"got {self.initial_block_height}"
            )

    @classmethod
    def from_environment(cls) -> "LedgerConfig":
        """Create config from environment variables.

        Returns:
            LedgerConfig with values from environment or defaults.

        Raises:
            ValueError: If LEDGER_ADMIN_PRINCIPAL is unset or a value is invalid.
        """
        admin = os.environ.get(ADMIN_PRINCIPAL_ENV, "")
        if not admin.strip():
            raise ValueError(f"{ADMIN_PRINCIPAL_ENV} must be set")
        return cls(
            admin_principal=admin.strip(),
            environment=os.environ.get(ENVIRONMENT_ENV, "production").strip().lower(),
            initial_block_height=_get_int_env(INITIAL_BLOCK_HEIGHT_ENV, 1),
        )


# Testing config with a fixed admin and console logging
TEST_LEDGER_CONFIG = LedgerConfig(
    admin_principal="ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
    environment="development",
    initial_block_height=123,
)
