"""Verifier registry service.

Maintains the admin-curated allowlist of principals trusted to verify
applicants and record requirement completions.

Developer Golden Rules:
1. ADMIN ONLY - Only the admin principal fixed at construction may add verifiers
2. IDEMPOTENT - Re-adding a verifier is a no-op success
3. CHECK BEFORE WRITE - A rejected call never touches the registry
"""

from __future__ import annotations

from src.application.ports.verifier_registry import VerifierRegistryProtocol
from src.application.services.base import LoggingMixin
from src.domain.errors.authorization import NotAdminError, NotAuthorizedVerifierError
from src.domain.errors.codes import ErrorCode
from src.domain.models.principal import Principal


class VerifierRegistryService(LoggingMixin):
    """Admin-gated verifier allowlist.

    Attributes:
        _admin: The single principal allowed to add verifiers.
        _registry: Allowlist storage port.
    """

    def __init__(self, admin: Principal, registry: VerifierRegistryProtocol) -> None:
        """Initialize the verifier registry service.

        Args:
            admin: The ledger admin principal.
            registry: Allowlist storage.
        """
        self._admin = admin
        self._registry = registry
        self._init_logger(component="verifier_registry")

    @property
    def admin(self) -> Principal:
        """The ledger admin principal."""
        return self._admin

    def is_admin(self, principal: Principal) -> bool:
        """Check whether a principal is the ledger admin."""
        return principal == self._admin

    def require_admin(
        self,
        caller: Principal,
        code: ErrorCode = ErrorCode.NOT_ADMIN,
    ) -> None:
        """Ensure the caller is the admin.

        Args:
            caller: The calling principal.
            code: Error code to report on failure.

        Raises:
            NotAdminError: If the caller is not the admin.
        """
        if not self.is_admin(caller):
            raise NotAdminError(caller, code=code)

    def add_verifier(self, caller: Principal, target: Principal) -> bool:
        """Add a principal to the verifier allowlist.

        Args:
            caller: The calling principal (must be admin).
            target: The principal to allow.

        Returns:
            True on success, including when target was already a verifier.

        Raises:
            NotAdminError: If the caller is not the admin (code 1000).
        """
        log = self._log_operation(
            "add_verifier", caller=str(caller), target=str(target)
        )
        self.require_admin(caller)

        already_present = self._registry.contains(target)
        self._registry.add(target)
        log.info("verifier_added", already_present=already_present)
        return True

    def is_verifier(self, principal: Principal) -> bool:
        """Check whether a principal is on the allowlist. Never fails."""
        return self._registry.contains(principal)

    def require_verifier(
        self,
        caller: Principal,
        code: ErrorCode = ErrorCode.NOT_AUTHORIZED_VERIFIER,
    ) -> None:
        """Ensure the caller is an authorized verifier.

        Args:
            caller: The calling principal.
            code: Error code to report on failure.

        Raises:
            NotAuthorizedVerifierError: If the caller is not on the allowlist.
        """
        if not self._registry.contains(caller):
            raise NotAuthorizedVerifierError(caller, code=code)

    def list_verifiers(self) -> list[Principal]:
        """List all verifiers in sorted order."""
        return self._registry.list_verifiers()
