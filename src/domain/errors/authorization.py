"""Authorization domain errors.

This module defines errors raised when a caller lacks a capability:
- NotAdminError: Caller is not the ledger admin
- NotAuthorizedVerifierError: Caller is not on the verifier allowlist

Authorization is a plain predicate check against stored data (equality
with the admin principal, membership in the verifier registry). There
are no role objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.errors.codes import ErrorCode
from src.domain.exceptions import AuthorizationError

if TYPE_CHECKING:
    from src.domain.models.principal import Principal


class NotAdminError(AuthorizationError):
    """Raised when a non-admin caller attempts an admin-only mutation.

    Example:
        >>> raise NotAdminError(Principal("ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"))
    """

    def __init__(
        self,
        caller: Principal,
        code: ErrorCode = ErrorCode.NOT_ADMIN,
    ) -> None:
        """Initialize not-admin error.

        Args:
            caller: The principal that attempted the operation.
            code: Operation-specific error code.
        """
        self.caller = caller
        super().__init__(code, f"Principal {caller} is not the ledger admin")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["caller"] = str(self.caller)
        return result


class NotAuthorizedVerifierError(AuthorizationError):
    """Raised when a caller outside the verifier allowlist attempts to attest.

    Used by applicant verification and requirement completion.
    """

    def __init__(
        self,
        caller: Principal,
        code: ErrorCode = ErrorCode.NOT_AUTHORIZED_VERIFIER,
    ) -> None:
        """Initialize not-authorized-verifier error.

        Args:
            caller: The principal that attempted the operation.
            code: Operation-specific error code.
        """
        self.caller = caller
        super().__init__(code, f"Principal {caller} is not an authorized verifier")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["caller"] = str(self.caller)
        return result
