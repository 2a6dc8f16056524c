"""Configuration module for the Credential Ledger.

Available Configurations:
- LedgerConfig: Admin principal, logging environment, block height start
"""

from src.config.ledger_config import TEST_LEDGER_CONFIG, LedgerConfig

__all__ = [
    "LedgerConfig",
    "TEST_LEDGER_CONFIG",
]
