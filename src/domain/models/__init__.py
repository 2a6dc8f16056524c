"""Domain models for the Credential Ledger.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from src.domain.models.applicant import ID_DOCUMENT_HASH_MAX_SIZE, ApplicantRecord
from src.domain.models.completion import CompletionKey, CompletionRecord
from src.domain.models.license_catalog import LicenseType, Requirement, RequirementKey
from src.domain.models.principal import Principal

__all__: list[str] = [
    "ID_DOCUMENT_HASH_MAX_SIZE",
    "ApplicantRecord",
    "CompletionKey",
    "CompletionRecord",
    "LicenseType",
    "Requirement",
    "RequirementKey",
    "Principal",
]
