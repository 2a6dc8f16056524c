"""Credential ledger call surface.

The CredentialLedger is the single entry point of the ledger. It owns
the admin principal (fixed at construction, never reassigned), wires
the four subsystems to their storage ports, and turns every domain
failure into a failed LedgerResult carrying the operation's error code.

Execution model:
- One operation runs to completion before the next is admitted
- No locks, retries or background work
- Every service checks all preconditions before its single write, so a
  failed operation leaves every registry unchanged

Usage:
    ledger = CredentialLedger(
        admin=Principal("ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"),
        verifier_registry=VerifierRegistryStub(),
        applicant_repository=ApplicantRepositoryStub(),
        catalog_repository=LicenseCatalogRepositoryStub(),
        completion_repository=CompletionRepositoryStub(),
        timestamps=BlockHeightStub(),
    )
    result = ledger.add_license_type(admin, "driver-license", "Driver License", "...")
    assert result.ok
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from src.application.dtos.ledger_result import LedgerResult
from src.application.dtos.license_progress import LicenseProgress
from src.application.ports.applicant_repository import ApplicantRepositoryProtocol
from src.application.ports.completion_repository import CompletionRepositoryProtocol
from src.application.ports.license_catalog_repository import (
    LicenseCatalogRepositoryProtocol,
)
from src.application.ports.timestamp_source import TimestampSourceProtocol
from src.application.ports.verifier_registry import VerifierRegistryProtocol
from src.application.services.applicant_registry_service import (
    ApplicantRegistryService,
)
from src.application.services.base import LoggingMixin
from src.application.services.completion_ledger_service import (
    CompletionLedgerService,
)
from src.application.services.license_catalog_service import LicenseCatalogService
from src.application.services.verifier_registry_service import (
    VerifierRegistryService,
)
from src.domain.exceptions import LedgerError
from src.domain.models.applicant import ApplicantRecord
from src.domain.models.completion import CompletionRecord
from src.domain.models.license_catalog import LicenseType, Requirement
from src.domain.models.principal import Principal
from src.infrastructure.observability.correlation import correlation_scope

T = TypeVar("T")


class CredentialLedger(LoggingMixin):
    """Applicant verification and license requirement tracking.

    Attributes:
        _verifiers: Verifier registry service (also holds the admin).
        _applicants: Applicant registry service.
        _catalog: License catalog service.
        _completions: Completion ledger service.
    """

    def __init__(
        self,
        admin: Principal,
        verifier_registry: VerifierRegistryProtocol,
        applicant_repository: ApplicantRepositoryProtocol,
        catalog_repository: LicenseCatalogRepositoryProtocol,
        completion_repository: CompletionRepositoryProtocol,
        timestamps: TimestampSourceProtocol,
    ) -> None:
        """Initialize the ledger and its services.

        Args:
            admin: The single principal allowed to curate verifiers and licenses.
            verifier_registry: Verifier allowlist storage.
            applicant_repository: Applicant record storage.
            catalog_repository: License type and requirement storage.
            completion_repository: Completion record storage.
            timestamps: Monotonic timestamp source (block height).
        """
        self._verifiers = VerifierRegistryService(admin, verifier_registry)
        self._applicants = ApplicantRegistryService(
            applicant_repository, self._verifiers, timestamps
        )
        self._catalog = LicenseCatalogService(catalog_repository, self._verifiers)
        self._completions = CompletionLedgerService(
            completion_repository, self._catalog, self._verifiers, timestamps
        )
        self._init_logger(component="ledger")

    @property
    def admin(self) -> Principal:
        """The ledger admin principal."""
        return self._verifiers.admin

    def _run(
        self,
        operation: str,
        action: Callable[[], T],
        **context: object,
    ) -> LedgerResult[T]:
        """Run one operation and wrap its outcome.

        Only LedgerError is converted; anything else is a programming
        error and propagates.
        """
        with correlation_scope():
            try:
                value = action()
            except LedgerError as exc:
                self._log_rejection(operation, exc, **context)
                return LedgerResult.failure(exc)
            return LedgerResult.success(value)

    # Verifier registry

    def add_verifier(self, caller: Principal, target: Principal) -> LedgerResult[bool]:
        """Add a verifier. Admin only; idempotent.

        Errors: NOT_ADMIN (1000).
        """
        return self._run(
            "add_verifier",
            lambda: self._verifiers.add_verifier(caller, target),
            caller=str(caller),
        )

    def is_verifier(self, principal: Principal) -> bool:
        """Check verifier membership. Never fails."""
        return self._verifiers.is_verifier(principal)

    def list_verifiers(self) -> list[Principal]:
        """List verifiers in sorted order."""
        return self._verifiers.list_verifiers()

    # Applicant registry

    def submit_applicant_info(
        self,
        caller: Principal,
        applicant_id: str,
        full_name: str,
        date_of_birth: str,
        id_document_hash: bytes,
    ) -> LedgerResult[bool]:
        """Submit applicant identity data (write-once).

        id_document_hash must be bytes-like (bytes, bytearray or memoryview)
        of at most 32 bytes. Shorter values are stored verbatim. Passing a
        non-bytes value such as str is a programming error and raises
        TypeError instead of returning a result.

        Errors: DUPLICATE_APPLICANT (1002), then INVALID_ID_DOCUMENT_HASH
        (1001) for a hash longer than 32 bytes.
        """
        return self._run(
            "submit_applicant_info",
            lambda: self._applicants.submit_applicant_info(
                caller, applicant_id, full_name, date_of_birth, id_document_hash
            ),
            caller=str(caller),
            applicant_id=applicant_id,
        )

    def verify_applicant(
        self, caller: Principal, applicant_id: str
    ) -> LedgerResult[bool]:
        """Verify an applicant.

        Errors: APPLICANT_NOT_FOUND (1003) before NOT_AUTHORIZED_VERIFIER (1004).
        """
        return self._run(
            "verify_applicant",
            lambda: self._applicants.verify_applicant(caller, applicant_id),
            caller=str(caller),
            applicant_id=applicant_id,
        )

    def is_applicant_verified(self, applicant_id: str) -> LedgerResult[bool]:
        """Errors: APPLICANT_NOT_FOUND (1003)."""
        return self._run(
            "is_applicant_verified",
            lambda: self._applicants.is_applicant_verified(applicant_id),
            applicant_id=applicant_id,
        )

    def get_applicant(self, applicant_id: str) -> LedgerResult[ApplicantRecord]:
        """Errors: APPLICANT_NOT_FOUND (1003)."""
        return self._run(
            "get_applicant",
            lambda: self._applicants.get_applicant(applicant_id),
            applicant_id=applicant_id,
        )

    # License catalog

    def add_license_type(
        self,
        caller: Principal,
        license_type_id: str,
        name: str,
        description: str,
    ) -> LedgerResult[bool]:
        """Add a license type.

        Errors: LICENSE_TYPE_NOT_ADMIN (2000), DUPLICATE_LICENSE_TYPE (2001).
        """
        return self._run(
            "add_license_type",
            lambda: self._catalog.add_license_type(
                caller, license_type_id, name, description
            ),
            caller=str(caller),
            license_type_id=license_type_id,
        )

    def add_requirement(
        self,
        caller: Principal,
        license_type_id: str,
        requirement_id: str,
        name: str,
        description: str,
        mandatory: bool,
    ) -> LedgerResult[bool]:
        """Add a requirement to a license type.

        Errors, in check order: REQUIREMENT_NOT_ADMIN (2002),
        LICENSE_TYPE_NOT_FOUND (2003), DUPLICATE_REQUIREMENT (2004).
        """
        return self._run(
            "add_requirement",
            lambda: self._catalog.add_requirement(
                caller, license_type_id, requirement_id, name, description, mandatory
            ),
            caller=str(caller),
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )

    def get_license_type(self, license_type_id: str) -> LedgerResult[LicenseType]:
        """Errors: LICENSE_TYPE_NOT_FOUND (2003)."""
        return self._run(
            "get_license_type",
            lambda: self._catalog.get_license_type(license_type_id),
            license_type_id=license_type_id,
        )

    def get_requirement(
        self, license_type_id: str, requirement_id: str
    ) -> LedgerResult[Requirement]:
        """Errors: REQUIREMENT_NOT_FOUND (2008)."""
        return self._run(
            "get_requirement",
            lambda: self._catalog.get_requirement(license_type_id, requirement_id),
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )

    def list_requirements(
        self, license_type_id: str
    ) -> LedgerResult[list[Requirement]]:
        """Errors: LICENSE_TYPE_NOT_FOUND (2003)."""
        return self._run(
            "list_requirements",
            lambda: self._catalog.list_requirements(license_type_id),
            license_type_id=license_type_id,
        )

    # Completion ledger

    def complete_requirement(
        self,
        caller: Principal,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> LedgerResult[bool]:
        """Record a requirement completion (overwrites on repeat).

        Errors, in check order: COMPLETION_NOT_AUTHORIZED_VERIFIER (2006),
        COMPLETION_LICENSE_TYPE_NOT_FOUND (2007), REQUIREMENT_NOT_FOUND (2008).
        """
        return self._run(
            "complete_requirement",
            lambda: self._completions.complete_requirement(
                caller, applicant_id, license_type_id, requirement_id
            ),
            caller=str(caller),
            applicant_id=applicant_id,
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )

    def is_requirement_completed(
        self,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> LedgerResult[bool]:
        """Errors: COMPLETION_NOT_FOUND (2009)."""
        return self._run(
            "is_requirement_completed",
            lambda: self._completions.is_requirement_completed(
                applicant_id, license_type_id, requirement_id
            ),
            applicant_id=applicant_id,
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )

    def get_completion(
        self,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> LedgerResult[CompletionRecord]:
        """Errors: COMPLETION_NOT_FOUND (2009)."""
        return self._run(
            "get_completion",
            lambda: self._completions.get_completion(
                applicant_id, license_type_id, requirement_id
            ),
            applicant_id=applicant_id,
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )

    def get_license_progress(
        self, applicant_id: str, license_type_id: str
    ) -> LedgerResult[LicenseProgress]:
        """Errors: LICENSE_TYPE_NOT_FOUND (2003)."""
        return self._run(
            "get_license_progress",
            lambda: self._completions.get_license_progress(
                applicant_id, license_type_id
            ),
            applicant_id=applicant_id,
            license_type_id=license_type_id,
        )
