"""Verifier registry stub for testing.

In-memory implementation of VerifierRegistryProtocol. Membership only:
principals are added, never removed.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.verifier_registry import VerifierRegistryProtocol
from src.domain.models.principal import Principal

logger = get_logger()


class VerifierRegistryStub(VerifierRegistryProtocol):
    """In-memory stub implementation of VerifierRegistryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty allowlist."""
        self._verifiers: set[Principal] = set()

    def add(self, principal: Principal) -> None:
        """Insert a principal into the allowlist (idempotent)."""
        if principal in self._verifiers:
            return
        self._verifiers.add(principal)
        logger.debug("verifier_stored", verifier=str(principal))

    def contains(self, principal: Principal) -> bool:
        """Check allowlist membership."""
        return principal in self._verifiers

    def list_verifiers(self) -> list[Principal]:
        """List all allowed principals in sorted order."""
        return sorted(self._verifiers)

    # Test helper methods

    def clear(self) -> None:
        """Clear the allowlist for test cleanup."""
        self._verifiers.clear()

    def get_verifier_count(self) -> int:
        """Get the number of allowed principals."""
        return len(self._verifiers)
