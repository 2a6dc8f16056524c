"""License progress DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LicenseProgress:
    """An applicant's completions against one license type.

    Requirement ids in each tuple are ordered by requirement id.

    Attributes:
        applicant_id: The applicant evaluated.
        license_type_id: The license type evaluated.
        completed: Requirements with a completion record.
        outstanding_mandatory: Mandatory requirements not yet completed.
        outstanding_optional: Optional requirements not yet completed.
    """

    applicant_id: str
    license_type_id: str
    completed: tuple[str, ...] = ()
    outstanding_mandatory: tuple[str, ...] = ()
    outstanding_optional: tuple[str, ...] = ()

    @property
    def is_eligible(self) -> bool:
        """True when every mandatory requirement has been completed."""
        return not self.outstanding_mandatory
