"""Applicant registry service.

Stores one identity record per applicant id and lets authorized
verifiers attest to it.

Invariants:
- Submission is self-service and write-once; presence alone rejects a resubmission
- Verification is verifier-gated and one-way (never reverts to unverified)

Developer Golden Rules:
1. EXISTENCE BEFORE AUTHORIZATION - verify_applicant reports a missing
   applicant before checking the caller, so probing reveals nothing extra
2. CHECK BEFORE WRITE - All checks run before the single repository write
3. NO ALREADY-VERIFIED ERROR - Re-verification succeeds and refreshes the timestamp
"""

from __future__ import annotations

from src.application.ports.applicant_repository import ApplicantRepositoryProtocol
from src.application.ports.timestamp_source import TimestampSourceProtocol
from src.application.services.base import LoggingMixin
from src.application.services.verifier_registry_service import VerifierRegistryService
from src.domain.errors.applicant import ApplicantNotFoundError, DuplicateApplicantError
from src.domain.errors.codes import ErrorCode
from src.domain.models.applicant import ApplicantRecord
from src.domain.models.principal import Principal


class ApplicantRegistryService(LoggingMixin):
    """Applicant identity submission and verification.

    Attributes:
        _repository: Applicant record storage.
        _verifiers: Verifier allowlist used for authorization.
        _timestamps: Source of verification timestamps.
    """

    def __init__(
        self,
        repository: ApplicantRepositoryProtocol,
        verifiers: VerifierRegistryService,
        timestamps: TimestampSourceProtocol,
    ) -> None:
        """Initialize the applicant registry service.

        Args:
            repository: Applicant record storage.
            verifiers: Verifier registry service for authorization checks.
            timestamps: Monotonic timestamp source.
        """
        self._repository = repository
        self._verifiers = verifiers
        self._timestamps = timestamps
        self._init_logger(component="applicant_registry")

    def submit_applicant_info(
        self,
        caller: Principal,
        applicant_id: str,
        full_name: str,
        date_of_birth: str,
        id_document_hash: bytes,
    ) -> bool:
        """Create an unverified applicant record owned by the caller.

        Args:
            caller: The submitting principal (becomes the record owner).
            applicant_id: Opaque applicant identifier.
            full_name: Applicant's full name.
            date_of_birth: ISO date string (stored verbatim).
            id_document_hash: Digest of the identity document (at most 32 bytes).

        Returns:
            True on success.

        Raises:
            DuplicateApplicantError: If the applicant id already exists (1002).
            InvalidIdDocumentHashError: If the hash exceeds 32 bytes (1001).
        """
        log = self._log_operation(
            "submit_applicant_info", caller=str(caller), applicant_id=applicant_id
        )

        if self._repository.get(applicant_id) is not None:
            raise DuplicateApplicantError(applicant_id)

        if isinstance(id_document_hash, (bytearray, memoryview)):
            id_document_hash = bytes(id_document_hash)

        record = ApplicantRecord(
            applicant_id=applicant_id,
            owner=caller,
            full_name=full_name,
            date_of_birth=date_of_birth,
            id_document_hash=id_document_hash,
        )
        if not self._repository.insert_if_absent(record):
            raise DuplicateApplicantError(applicant_id)

        log.info("applicant_submitted")
        return True

    def verify_applicant(self, caller: Principal, applicant_id: str) -> bool:
        """Mark an applicant as verified.

        Args:
            caller: The calling principal (must be a verifier).
            applicant_id: The applicant to verify.

        Returns:
            True on success, including re-verification.

        Raises:
            ApplicantNotFoundError: If no record exists (1003), checked first.
            NotAuthorizedVerifierError: If the caller is not a verifier (1004).
        """
        log = self._log_operation(
            "verify_applicant", caller=str(caller), applicant_id=applicant_id
        )

        record = self._repository.get(applicant_id)
        if record is None:
            raise ApplicantNotFoundError(applicant_id)
        self._verifiers.require_verifier(caller, code=ErrorCode.NOT_AUTHORIZED_VERIFIER)

        timestamp = self._timestamps.current_timestamp()
        self._repository.put(record.with_verification(timestamp))

        log.info(
            "applicant_verified",
            verification_timestamp=timestamp,
            reverification=record.verified,
        )
        return True

    def get_applicant(self, applicant_id: str) -> ApplicantRecord:
        """Get an applicant record.

        Raises:
            ApplicantNotFoundError: If no record exists.
        """
        record = self._repository.get(applicant_id)
        if record is None:
            raise ApplicantNotFoundError(applicant_id)
        return record

    def is_applicant_verified(self, applicant_id: str) -> bool:
        """Report whether an applicant has been verified.

        Raises:
            ApplicantNotFoundError: If no record exists.
        """
        return self.get_applicant(applicant_id).verified
