"""Base exception classes for the Credential Ledger domain layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.errors.codes import ErrorCode


class LedgerError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    The call surface converts any LedgerError into a failed result
    carrying its numeric code, so every subclass must set one.

    Attributes:
        code: Numeric error code reported to the caller.
        message: Human-readable error description.
    """

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        """Initialize the exception with its code and an optional message.

        Args:
            code: Numeric error code for the failed operation.
            message: Human-readable error description.
        """
        self.code = code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to a structured error payload.

        Returns:
            Dictionary with the error code, its name and the message.
        """
        return {
            "code": int(self.code),
            "error": self.code.name,
            "category": self.category,
            "message": self.message,
        }

    @property
    def category(self) -> str:
        """Error taxonomy bucket (authorization, not_found, conflict, validation)."""
        return "ledger"


class AuthorizationError(LedgerError):
    """Caller lacks the admin or verifier capability for the operation."""

    @property
    def category(self) -> str:
        return "authorization"


class NotFoundError(LedgerError):
    """A referenced record does not exist."""

    @property
    def category(self) -> str:
        return "not_found"


class ConflictError(LedgerError):
    """A write-once record already exists under the given key."""

    @property
    def category(self) -> str:
        return "conflict"


class ValidationError(LedgerError):
    """Submitted field values are malformed."""

    @property
    def category(self) -> str:
        return "validation"
