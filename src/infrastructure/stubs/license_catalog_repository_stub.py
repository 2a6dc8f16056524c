"""License catalog repository stub for testing.

In-memory implementation of LicenseCatalogRepositoryProtocol. Both
license types and requirements are write-once.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.license_catalog_repository import (
    LicenseCatalogRepositoryProtocol,
)
from src.domain.models.license_catalog import LicenseType, Requirement, RequirementKey

logger = get_logger()


class LicenseCatalogRepositoryStub(LicenseCatalogRepositoryProtocol):
    """In-memory stub implementation of LicenseCatalogRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._license_types: dict[str, LicenseType] = {}
        self._requirements: dict[RequirementKey, Requirement] = {}

    def get_license_type(self, license_type_id: str) -> LicenseType | None:
        """Get a license type by id."""
        return self._license_types.get(license_type_id)

    def insert_license_type_if_absent(self, license_type: LicenseType) -> bool:
        """Insert a license type unless its id is already present."""
        if license_type.id in self._license_types:
            return False
        self._license_types[license_type.id] = license_type
        logger.debug("license_type_stored", license_type_id=license_type.id)
        return True

    def get_requirement(self, key: RequirementKey) -> Requirement | None:
        """Get a requirement by its composite key."""
        return self._requirements.get(key)

    def insert_requirement_if_absent(self, requirement: Requirement) -> bool:
        """Insert a requirement unless its key is already present."""
        if requirement.key in self._requirements:
            return False
        self._requirements[requirement.key] = requirement
        logger.debug(
            "requirement_stored",
            license_type_id=requirement.license_type_id,
            requirement_id=requirement.requirement_id,
        )
        return True

    def list_requirements(self, license_type_id: str) -> list[Requirement]:
        """List the requirements of a license type ordered by requirement id."""
        return [
            self._requirements[key]
            for key in sorted(self._requirements)
            if key.license_type_id == license_type_id
        ]

    # Test helper methods

    def clear(self) -> None:
        """Clear the catalog for test cleanup."""
        self._license_types.clear()
        self._requirements.clear()

    def get_license_type_count(self) -> int:
        """Get the number of stored license types."""
        return len(self._license_types)

    def get_requirement_count(self) -> int:
        """Get the number of stored requirements."""
        return len(self._requirements)
