"""Domain errors for the Credential Ledger.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from LedgerError and carry an ErrorCode.
"""

from src.domain.errors.applicant import (
    ApplicantNotFoundError,
    DuplicateApplicantError,
    InvalidIdDocumentHashError,
)
from src.domain.errors.authorization import NotAdminError, NotAuthorizedVerifierError
from src.domain.errors.codes import ErrorCode
from src.domain.errors.license import (
    CompletionNotFoundError,
    DuplicateLicenseTypeError,
    DuplicateRequirementError,
    LicenseTypeNotFoundError,
    RequirementNotFoundError,
)

__all__: list[str] = [
    "ErrorCode",
    "NotAdminError",
    "NotAuthorizedVerifierError",
    "ApplicantNotFoundError",
    "DuplicateApplicantError",
    "InvalidIdDocumentHashError",
    "LicenseTypeNotFoundError",
    "DuplicateLicenseTypeError",
    "RequirementNotFoundError",
    "DuplicateRequirementError",
    "CompletionNotFoundError",
]
