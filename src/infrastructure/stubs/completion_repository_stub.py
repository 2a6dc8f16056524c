"""Completion repository stub for testing.

In-memory implementation of CompletionRepositoryProtocol. put() replaces
an existing record for the same key.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.completion_repository import CompletionRepositoryProtocol
from src.domain.models.completion import CompletionKey, CompletionRecord

logger = get_logger()


class CompletionRepositoryStub(CompletionRepositoryProtocol):
    """In-memory stub implementation of CompletionRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty repository."""
        self._records: dict[CompletionKey, CompletionRecord] = {}

    def get(self, key: CompletionKey) -> CompletionRecord | None:
        """Get the completion record for a triple."""
        return self._records.get(key)

    def put(self, key: CompletionKey, record: CompletionRecord) -> None:
        """Store a completion record, replacing any existing one."""
        replaced = key in self._records
        self._records[key] = record
        logger.debug(
            "completion_record_stored",
            applicant_id=key.applicant_id,
            license_type_id=key.license_type_id,
            requirement_id=key.requirement_id,
            replaced=replaced,
        )

    # Test helper methods

    def clear(self) -> None:
        """Clear all records for test cleanup."""
        self._records.clear()

    def get_completion_count(self) -> int:
        """Get the number of stored records."""
        return len(self._records)
