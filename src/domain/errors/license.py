"""License catalog and completion ledger domain errors.

This module defines errors for license types, their requirements and
per-applicant completion records:
- LicenseTypeNotFoundError / DuplicateLicenseTypeError
- RequirementNotFoundError / DuplicateRequirementError
- CompletionNotFoundError

Completion records are NOT write-once, so there is no duplicate error
for them. Absence of a completion record is reported as an error rather
than a False value.
"""

from __future__ import annotations

from src.domain.errors.codes import ErrorCode
from src.domain.exceptions import ConflictError, NotFoundError


class LicenseTypeNotFoundError(NotFoundError):
    """Raised when a referenced license type does not exist."""

    def __init__(
        self,
        license_type_id: str,
        code: ErrorCode = ErrorCode.LICENSE_TYPE_NOT_FOUND,
    ) -> None:
        """Initialize license type not found error.

        Args:
            license_type_id: The unknown license type identifier.
            code: Operation-specific error code.
        """
        self.license_type_id = license_type_id
        super().__init__(code, f"License type {license_type_id} not found")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["license_type_id"] = self.license_type_id
        return result


class DuplicateLicenseTypeError(ConflictError):
    """Raised when a license type id is already in the catalog."""

    def __init__(self, license_type_id: str) -> None:
        self.license_type_id = license_type_id
        super().__init__(
            ErrorCode.DUPLICATE_LICENSE_TYPE,
            f"License type {license_type_id} already exists",
        )


class RequirementNotFoundError(NotFoundError):
    """Raised when a (license type, requirement) pair does not exist."""

    def __init__(self, license_type_id: str, requirement_id: str) -> None:
        """Initialize requirement not found error.

        Args:
            license_type_id: The parent license type identifier.
            requirement_id: The unknown requirement identifier.
        """
        self.license_type_id = license_type_id
        self.requirement_id = requirement_id
        super().__init__(
            ErrorCode.REQUIREMENT_NOT_FOUND,
            f"Requirement {requirement_id} not found for license type "
            f"{license_type_id}",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["license_type_id"] = self.license_type_id
        result["requirement_id"] = self.requirement_id
        return result


class DuplicateRequirementError(ConflictError):
    """Raised when a requirement key is already registered."""

    def __init__(self, license_type_id: str, requirement_id: str) -> None:
        self.license_type_id = license_type_id
        self.requirement_id = requirement_id
        super().__init__(
            ErrorCode.DUPLICATE_REQUIREMENT,
            f"Requirement {requirement_id} already exists for license type "
            f"{license_type_id}",
        )


class CompletionNotFoundError(NotFoundError):
    """Raised when no completion record exists for the triple.

    Absence always means "not yet completed": the ledger has no
    failed-attempt state.
    """

    def __init__(
        self,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> None:
        """Initialize completion not found error.

        Args:
            applicant_id: The applicant identifier.
            license_type_id: The license type identifier.
            requirement_id: The requirement identifier.
        """
        self.applicant_id = applicant_id
        self.license_type_id = license_type_id
        self.requirement_id = requirement_id
        super().__init__(
            ErrorCode.COMPLETION_NOT_FOUND,
            f"No completion recorded for applicant {applicant_id} on "
            f"{license_type_id}/{requirement_id}",
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["applicant_id"] = self.applicant_id
        result["license_type_id"] = self.license_type_id
        result["requirement_id"] = self.requirement_id
        return result
