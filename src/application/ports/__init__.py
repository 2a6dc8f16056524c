"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- TimestampSourceProtocol: Monotonic counter used as timestamp (block height)
- VerifierRegistryProtocol: Verifier allowlist storage
- ApplicantRepositoryProtocol: Applicant identity record storage
- LicenseCatalogRepositoryProtocol: License type and requirement storage
- CompletionRepositoryProtocol: Requirement completion storage
"""

from src.application.ports.applicant_repository import ApplicantRepositoryProtocol
from src.application.ports.completion_repository import CompletionRepositoryProtocol
from src.application.ports.license_catalog_repository import (
    LicenseCatalogRepositoryProtocol,
)
from src.application.ports.timestamp_source import TimestampSourceProtocol
from src.application.ports.verifier_registry import VerifierRegistryProtocol

__all__: list[str] = [
    "TimestampSourceProtocol",
    "VerifierRegistryProtocol",
    "ApplicantRepositoryProtocol",
    "LicenseCatalogRepositoryProtocol",
    "CompletionRepositoryProtocol",
]
