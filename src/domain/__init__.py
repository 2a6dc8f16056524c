"""
Domain layer - Pure business logic for the Credential Ledger.

This layer contains:
- Domain models (Principal, ApplicantRecord, LicenseType, ...)
- Composite keys (RequirementKey, CompletionKey)
- Domain exceptions and error codes

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from src.domain.errors import ErrorCode
from src.domain.exceptions import LedgerError
from src.domain.models import (
    ApplicantRecord,
    CompletionKey,
    CompletionRecord,
    LicenseType,
    Principal,
    Requirement,
    RequirementKey,
)

__all__: list[str] = [
    "LedgerError",
    "ErrorCode",
    "Principal",
    "ApplicantRecord",
    "LicenseType",
    "Requirement",
    "RequirementKey",
    "CompletionKey",
    "CompletionRecord",
]
