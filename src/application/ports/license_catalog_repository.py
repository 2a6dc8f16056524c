"""License catalog repository protocol definition.

Defines the abstract interface for storing license types and their
requirements. Both maps are write-once: there is no put().
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.license_catalog import LicenseType, Requirement, RequirementKey


class LicenseCatalogRepositoryProtocol(ABC):
    """Abstract protocol for license catalog storage."""

    @abstractmethod
    def get_license_type(self, license_type_id: str) -> LicenseType | None:
        """Get a license type by id.

        Args:
            license_type_id: The license type identifier.

        Returns:
            LicenseType if found, None otherwise.
        """
        ...

    @abstractmethod
    def insert_license_type_if_absent(self, license_type: LicenseType) -> bool:
        """Insert a license type unless its id is already present.

        Returns:
            True if inserted, False if the id was taken.
        """
        ...

    @abstractmethod
    def get_requirement(self, key: RequirementKey) -> Requirement | None:
        """Get a requirement by its composite key.

        Args:
            key: The (license_type_id, requirement_id) key.

        Returns:
            Requirement if found, None otherwise.
        """
        ...

    @abstractmethod
    def insert_requirement_if_absent(self, requirement: Requirement) -> bool:
        """Insert a requirement unless its key is already present.

        Returns:
            True if inserted, False if the key was taken.
        """
        ...

    @abstractmethod
    def list_requirements(self, license_type_id: str) -> list[Requirement]:
        """List the requirements of a license type ordered by requirement id.

        Args:
            license_type_id: The license type identifier.

        Returns:
            Requirements of the license type (may be empty).
        """
        ...
