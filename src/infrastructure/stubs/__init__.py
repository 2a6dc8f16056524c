"""Infrastructure stubs for development and testing.

This module provides in-memory implementations of the application ports.

Available stubs:
- BlockHeightStub: Monotonic counter, advanced explicitly
- VerifierRegistryStub: Verifier allowlist
- ApplicantRepositoryStub: Applicant identity records
- LicenseCatalogRepositoryStub: License types and requirements
- CompletionRepositoryStub: Requirement completion records

WARNING: These stubs keep state in process memory only.
"""

from src.infrastructure.stubs.applicant_repository_stub import ApplicantRepositoryStub
from src.infrastructure.stubs.block_height_stub import BlockHeightStub
from src.infrastructure.stubs.completion_repository_stub import (
    CompletionRepositoryStub,
)
from src.infrastructure.stubs.license_catalog_repository_stub import (
    LicenseCatalogRepositoryStub,
)
from src.infrastructure.stubs.verifier_registry_stub import VerifierRegistryStub

__all__: list[str] = [
    "ApplicantRepositoryStub",
    "BlockHeightStub",
    "CompletionRepositoryStub",
    "LicenseCatalogRepositoryStub",
    "VerifierRegistryStub",
]
