"""Requirement completion domain models.

A completion record is evidence that an applicant satisfied a specific
requirement, attributed to the verifier who recorded it. Unlike the
other ledger entities it is overwritten on repeat: recording the same
triple again replaces verified_by and the timestamp.

The applicant id is deliberately not linked to the applicant registry;
completion tracking is orthogonal to identity verification.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.models.license_catalog import RequirementKey
from src.domain.models.principal import Principal


@dataclass(frozen=True, eq=True, order=True)
class CompletionKey:
    """Composite key of a completion record."""

    applicant_id: str
    license_type_id: str
    requirement_id: str

    @property
    def requirement_key(self) -> RequirementKey:
        """Catalog key of the requirement this completion refers to."""
        return RequirementKey(self.license_type_id, self.requirement_id)


@dataclass(frozen=True, eq=True)
class CompletionRecord:
    """Completion of one requirement by one applicant.

    Attributes:
        completion_timestamp: Block height at which completion was recorded.
        verified_by: The verifier that recorded the completion.
        completed: Always True on creation.
    """

    completion_timestamp: int
    verified_by: Principal
    completed: bool = field(default=True)
