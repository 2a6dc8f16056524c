"""Applicant repository protocol definition.

Defines the abstract interface for applicant record storage, expressed
as logical map operations over applicant ids.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.applicant import ApplicantRecord


class ApplicantRepositoryProtocol(ABC):
    """Abstract protocol for applicant record storage.

    Records are never deleted. Creation goes through insert_if_absent()
    so that an existing record is never replaced by a submission;
    put() is reserved for the verification transition.
    """

    @abstractmethod
    def get(self, applicant_id: str) -> ApplicantRecord | None:
        """Get the record for an applicant id.

        Args:
            applicant_id: The applicant identifier.

        Returns:
            ApplicantRecord if found, None otherwise.
        """
        ...

    @abstractmethod
    def insert_if_absent(self, record: ApplicantRecord) -> bool:
        """Insert a record unless its applicant id is already present.

        Args:
            record: The record to insert.

        Returns:
            True if the record was inserted, False if the id was taken.
        """
        ...

    @abstractmethod
    def put(self, record: ApplicantRecord) -> None:
        """Unconditionally store a record under its applicant id.

        Args:
            record: The record to store.
        """
        ...
