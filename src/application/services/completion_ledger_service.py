"""Completion ledger service.

Records, per (applicant, license type, requirement) triple, that a
requirement was satisfied and which verifier recorded it.

Invariants:
- Only authorized verifiers record completions
- The (license type, requirement) pair must exist in the catalog
- The applicant id is NOT checked against the applicant registry
- Recording a triple again overwrites verified_by and the timestamp

Check order for complete_requirement is fixed: verifier, then license
type existence, then requirement existence.
"""

from __future__ import annotations

from src.application.dtos.license_progress import LicenseProgress
from src.application.ports.completion_repository import CompletionRepositoryProtocol
from src.application.ports.timestamp_source import TimestampSourceProtocol
from src.application.services.base import LoggingMixin
from src.application.services.license_catalog_service import LicenseCatalogService
from src.application.services.verifier_registry_service import VerifierRegistryService
from src.domain.errors.codes import ErrorCode
from src.domain.errors.license import CompletionNotFoundError
from src.domain.models.completion import CompletionKey, CompletionRecord
from src.domain.models.principal import Principal


class CompletionLedgerService(LoggingMixin):
    """Verifier-gated requirement completion tracking.

    Attributes:
        _repository: Completion record storage.
        _catalog: License catalog for type/requirement existence checks.
        _verifiers: Verifier allowlist for authorization.
        _timestamps: Source of completion timestamps.
    """

    def __init__(
        self,
        repository: CompletionRepositoryProtocol,
        catalog: LicenseCatalogService,
        verifiers: VerifierRegistryService,
        timestamps: TimestampSourceProtocol,
    ) -> None:
        """Initialize the completion ledger service.

        Args:
            repository: Completion record storage.
            catalog: License catalog service.
            verifiers: Verifier registry service.
            timestamps: Monotonic timestamp source.
        """
        self._repository = repository
        self._catalog = catalog
        self._verifiers = verifiers
        self._timestamps = timestamps
        self._init_logger(component="completion_ledger")

    def complete_requirement(
        self,
        caller: Principal,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> bool:
        """Record that an applicant satisfied a requirement.

        Returns:
            True on success, including when overwriting an earlier record.

        Raises:
            NotAuthorizedVerifierError: If the caller is not a verifier (2006).
            LicenseTypeNotFoundError: If the license type is missing (2007).
            RequirementNotFoundError: If the requirement is missing (2008).
        """
        log = self._log_operation(
            "complete_requirement",
            caller=str(caller),
            applicant_id=applicant_id,
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )
        self._verifiers.require_verifier(
            caller, code=ErrorCode.COMPLETION_NOT_AUTHORIZED_VERIFIER
        )
        self._catalog.get_license_type(
            license_type_id, code=ErrorCode.COMPLETION_LICENSE_TYPE_NOT_FOUND
        )
        self._catalog.get_requirement(license_type_id, requirement_id)

        key = CompletionKey(applicant_id, license_type_id, requirement_id)
        previous = self._repository.get(key)
        timestamp = self._timestamps.current_timestamp()
        self._repository.put(
            key,
            CompletionRecord(completion_timestamp=timestamp, verified_by=caller),
        )

        log.info(
            "requirement_completed",
            completion_timestamp=timestamp,
            overwrote=previous is not None,
        )
        return True

    def get_completion(
        self,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> CompletionRecord:
        """Get the completion record for a triple.

        Raises:
            CompletionNotFoundError: If nothing was recorded (2009).
        """
        record = self._repository.get(
            CompletionKey(applicant_id, license_type_id, requirement_id)
        )
        if record is None:
            raise CompletionNotFoundError(applicant_id, license_type_id, requirement_id)
        return record

    def is_requirement_completed(
        self,
        applicant_id: str,
        license_type_id: str,
        requirement_id: str,
    ) -> bool:
        """Report the completed flag of a recorded triple.

        Absence is an error, not False.

        Raises:
            CompletionNotFoundError: If nothing was recorded (2009).
        """
        return self.get_completion(applicant_id, license_type_id, requirement_id).completed

    def get_license_progress(
        self, applicant_id: str, license_type_id: str
    ) -> LicenseProgress:
        """Summarize an applicant's completions against a license type.

        Args:
            applicant_id: The applicant identifier (not checked for existence).
            license_type_id: The license type to evaluate.

        Returns:
            LicenseProgress listing completed and outstanding requirements.

        Raises:
            LicenseTypeNotFoundError: If the license type does not exist (2003).
        """
        completed: list[str] = []
        outstanding_mandatory: list[str] = []
        outstanding_optional: list[str] = []

        for requirement in self._catalog.list_requirements(license_type_id):
            key = CompletionKey(
                applicant_id, license_type_id, requirement.requirement_id
            )
            record = self._repository.get(key)
            if record is not None and record.completed:
                completed.append(requirement.requirement_id)
            elif requirement.mandatory:
                outstanding_mandatory.append(requirement.requirement_id)
            else:
                outstanding_optional.append(requirement.requirement_id)

        return LicenseProgress(
            applicant_id=applicant_id,
            license_type_id=license_type_id,
            completed=tuple(completed),
            outstanding_mandatory=tuple(outstanding_mandatory),
            outstanding_optional=tuple(outstanding_optional),
        )
