"""Application services for the Credential Ledger.

Available services:
- VerifierRegistryService: Admin-gated verifier allowlist
- ApplicantRegistryService: Applicant submission and verification
- LicenseCatalogService: License types and requirements
- CompletionLedgerService: Requirement completion tracking
- IdDocumentHashService: BLAKE3 id document hashing
- CredentialLedger: Call surface wrapping all of the above
"""

from src.application.services.applicant_registry_service import (
    ApplicantRegistryService,
)
from src.application.services.completion_ledger_service import (
    CompletionLedgerService,
)
from src.application.services.credential_ledger import CredentialLedger
from src.application.services.id_document_hash_service import IdDocumentHashService
from src.application.services.license_catalog_service import LicenseCatalogService
from src.application.services.verifier_registry_service import (
    VerifierRegistryService,
)

__all__: list[str] = [
    "ApplicantRegistryService",
    "CompletionLedgerService",
    "CredentialLedger",
    "IdDocumentHashService",
    "LicenseCatalogService",
    "VerifierRegistryService",
]
