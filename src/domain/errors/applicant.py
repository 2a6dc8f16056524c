"""Applicant registry domain errors.

This module defines errors related to applicant identity records:
- ApplicantNotFoundError: No record exists for the applicant id
- DuplicateApplicantError: A record already exists (write-once)
- InvalidIdDocumentHashError: Document hash exceeds 32 bytes

Developer Golden Rules:
1. PRESENCE DECIDES - A duplicate is any existing record, fields are never compared
2. EXISTENCE BEFORE AUTHORIZATION - Verification reports a missing applicant first
"""

from __future__ import annotations

from src.domain.errors.codes import ErrorCode
from src.domain.exceptions import ConflictError, NotFoundError, ValidationError


class ApplicantNotFoundError(NotFoundError):
    """Raised when no applicant record exists for the given id.

    Example:
        >>> raise ApplicantNotFoundError("123e4567-e89b-12d3-a456-426614174000")
    """

    def __init__(self, applicant_id: str) -> None:
        """Initialize applicant not found error.

        Args:
            applicant_id: The unknown applicant identifier.
        """
        self.applicant_id = applicant_id
        super().__init__(
            ErrorCode.APPLICANT_NOT_FOUND,
            f"Applicant {applicant_id} not found",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["applicant_id"] = self.applicant_id
        return result


class DuplicateApplicantError(ConflictError):
    """Raised when an applicant id has already been submitted.

    Identical resubmissions are rejected too: the stored record always
    reflects the first submission.
    """

    def __init__(self, applicant_id: str) -> None:
        """Initialize duplicate applicant error.

        Args:
            applicant_id: The already-registered applicant identifier.
        """
        self.applicant_id = applicant_id
        super().__init__(
            ErrorCode.DUPLICATE_APPLICANT,
            f"Applicant {applicant_id} already submitted",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["applicant_id"] = self.applicant_id
        return result


class InvalidIdDocumentHashError(ValidationError):
    """Raised when an id document hash is longer than the stored field allows."""

    def __init__(self, max_size: int, actual_size: int) -> None:
        """Initialize invalid hash error.

        Args:
            max_size: Largest accepted hash size in bytes.
            actual_size: Size of the submitted value in bytes.
        """
        self.max_size = max_size
        self.actual_size = actual_size
        super().__init__(
            ErrorCode.INVALID_ID_DOCUMENT_HASH,
            f"id_document_hash must be at most {max_size} bytes, got {actual_size}",
        )
