"""Verifier registry protocol definition.

Defines the abstract interface for storing the verifier allowlist.
Infrastructure adapters must implement this protocol.

Only membership is tracked: there is no revocation operation, and
adding a principal that is already present is a no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.principal import Principal


class VerifierRegistryProtocol(ABC):
    """Abstract protocol for verifier allowlist storage.

    Admin checks are NOT the responsibility of this port; the
    application service authorizes callers before writing.
    """

    @abstractmethod
    def add(self, principal: Principal) -> None:
        """Insert a principal into the allowlist (idempotent).

        Args:
            principal: The principal to allow.
        """
        ...

    @abstractmethod
    def contains(self, principal: Principal) -> bool:
        """Check allowlist membership.

        Args:
            principal: The principal to check.

        Returns:
            True if the principal was added, False otherwise.
        """
        ...

    @abstractmethod
    def list_verifiers(self) -> list[Principal]:
        """List all allowed principals in sorted order.

        Returns:
            Sorted list of verifier principals (may be empty).
        """
        ...
