"""License catalog domain models.

This module defines license types and the requirements attached to them.
Both are write-once, admin-created and flat (no hierarchy, no versions).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=True)
class LicenseType:
    """A named category of credential.

    Attributes:
        id: Unique license type identifier (e.g. "driver-license").
        name: Human-readable name.
        description: Free-text description.
        active: Always True on creation; there is no deactivation.
    """

    id: str
    name: str
    description: str
    active: bool = field(default=True)


@dataclass(frozen=True, eq=True, order=True)
class RequirementKey:
    """Composite key of a requirement within the catalog.

    A structured key avoids the collisions a joined string would have
    when a component contains the separator.
    """

    license_type_id: str
    requirement_id: str


@dataclass(frozen=True, eq=True)
class Requirement:
    """A named condition attached to a license type.

    Attributes:
        license_type_id: Parent license type (must exist at creation).
        requirement_id: Identifier unique within the license type.
        name: Human-readable name.
        description: Free-text description.
        mandatory: Whether the requirement gates license eligibility.
    """

    license_type_id: str
    requirement_id: str
    name: str
    description: str
    mandatory: bool

    @property
    def key(self) -> RequirementKey:
        """Composite catalog key for this requirement."""
        return RequirementKey(self.license_type_id, self.requirement_id)
