"""Applicant repository stub for testing.

In-memory implementation of ApplicantRepositoryProtocol.

Records are NEVER deleted: the stub has no removal method other than
the clear() test helper.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.applicant_repository import ApplicantRepositoryProtocol
from src.domain.models.applicant import ApplicantRecord

logger = get_logger()


class ApplicantRepositoryStub(ApplicantRepositoryProtocol):
    """In-memory stub implementation of ApplicantRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._records: dict[str, ApplicantRecord] = {}  # applicant_id -> record

    def get(self, applicant_id: str) -> ApplicantRecord | None:
        """Get the record for an applicant id."""
        return self._records.get(applicant_id)

    def insert_if_absent(self, record: ApplicantRecord) -> bool:
        """Insert a record unless its applicant id is already present."""
        if record.applicant_id in self._records:
            return False
        self._records[record.applicant_id] = record
        logger.debug("applicant_record_stored", applicant_id=record.applicant_id)
        return True

    def put(self, record: ApplicantRecord) -> None:
        """Unconditionally store a record under its applicant id."""
        self._records[record.applicant_id] = record

    # Test helper methods

    def clear(self) -> None:
        """Clear all records for test cleanup."""
        self._records.clear()

    def get_applicant_count(self) -> int:
        """Get the number of stored records."""
        return len(self._records)
