"""Bootstrap wiring for ledger logging configuration."""

from __future__ import annotations

from src.config.ledger_config import LedgerConfig
from src.infrastructure.observability import configure_structlog


def configure_ledger_logging(config: LedgerConfig) -> None:
    """Configure structlog for the ledger's configured environment."""
    configure_structlog(environment=config.environment)


__all__ = ["configure_ledger_logging"]
