"""License catalog service.

Admin-curated set of license types and, per type, named requirements.

Invariants:
- License types and requirements are write-once and admin-only
- A requirement's parent license type must exist before the requirement
- Requirement keys are structured (license_type_id, requirement_id) pairs

Check order for add_requirement is fixed: admin, then license type
existence, then requirement key uniqueness.
"""

from __future__ import annotations

from src.application.ports.license_catalog_repository import (
    LicenseCatalogRepositoryProtocol,
)
from src.application.services.base import LoggingMixin
from src.application.services.verifier_registry_service import VerifierRegistryService
from src.domain.errors.codes import ErrorCode
from src.domain.errors.license import (
    DuplicateLicenseTypeError,
    DuplicateRequirementError,
    LicenseTypeNotFoundError,
    RequirementNotFoundError,
)
from src.domain.models.license_catalog import LicenseType, Requirement, RequirementKey
from src.domain.models.principal import Principal


class LicenseCatalogService(LoggingMixin):
    """Admin-gated license type and requirement catalog.

    Attributes:
        _repository: Catalog storage.
        _verifiers: Verifier registry service, used for its admin check.
    """

    def __init__(
        self,
        repository: LicenseCatalogRepositoryProtocol,
        verifiers: VerifierRegistryService,
    ) -> None:
        """Initialize the license catalog service.

        Args:
            repository: Catalog storage.
            verifiers: Verifier registry service holding the admin principal.
        """
        self._repository = repository
        self._verifiers = verifiers
        self._init_logger(component="license_catalog")

    def add_license_type(
        self,
        caller: Principal,
        license_type_id: str,
        name: str,
        description: str,
    ) -> bool:
        """Create an active license type.

        Returns:
            True on success.

        Raises:
            NotAdminError: If the caller is not the admin (2000).
            DuplicateLicenseTypeError: If the id already exists (2001).
        """
        log = self._log_operation(
            "add_license_type", caller=str(caller), license_type_id=license_type_id
        )
        self._verifiers.require_admin(caller, code=ErrorCode.LICENSE_TYPE_NOT_ADMIN)

        license_type = LicenseType(id=license_type_id, name=name, description=description)
        if not self._repository.insert_license_type_if_absent(license_type):
            raise DuplicateLicenseTypeError(license_type_id)

        log.info("license_type_added")
        return True

    def add_requirement(
        self,
        caller: Principal,
        license_type_id: str,
        requirement_id: str,
        name: str,
        description: str,
        mandatory: bool,
    ) -> bool:
        """Attach a requirement to an existing license type.

        Returns:
            True on success.

        Raises:
            NotAdminError: If the caller is not the admin (2002).
            LicenseTypeNotFoundError: If the license type is missing (2003).
            DuplicateRequirementError: If the key already exists (2004).
        """
        log = self._log_operation(
            "add_requirement",
            caller=str(caller),
            license_type_id=license_type_id,
            requirement_id=requirement_id,
        )
        self._verifiers.require_admin(caller, code=ErrorCode.REQUIREMENT_NOT_ADMIN)
        self.get_license_type(license_type_id)

        requirement = Requirement(
            license_type_id=license_type_id,
            requirement_id=requirement_id,
            name=name,
            description=description,
            mandatory=mandatory,
        )
        if not self._repository.insert_requirement_if_absent(requirement):
            raise DuplicateRequirementError(license_type_id, requirement_id)

        log.info("requirement_added", mandatory=mandatory)
        return True

    def get_license_type(
        self,
        license_type_id: str,
        code: ErrorCode = ErrorCode.LICENSE_TYPE_NOT_FOUND,
    ) -> LicenseType:
        """Get a license type.

        Args:
            license_type_id: The license type identifier.
            code: Error code to report if it is missing.

        Raises:
            LicenseTypeNotFoundError: If the license type does not exist.
        """
        license_type = self._repository.get_license_type(license_type_id)
        if license_type is None:
            raise LicenseTypeNotFoundError(license_type_id, code=code)
        return license_type

    def get_requirement(self, license_type_id: str, requirement_id: str) -> Requirement:
        """Get a requirement by its parent license type and id.

        Raises:
            RequirementNotFoundError: If the requirement does not exist.
        """
        requirement = self._repository.get_requirement(
            RequirementKey(license_type_id, requirement_id)
        )
        if requirement is None:
            raise RequirementNotFoundError(license_type_id, requirement_id)
        return requirement

    def list_requirements(self, license_type_id: str) -> list[Requirement]:
        """List a license type's requirements ordered by requirement id.

        Raises:
            LicenseTypeNotFoundError: If the license type does not exist.
        """
        self.get_license_type(license_type_id)
        return self._repository.list_requirements(license_type_id)
