"""Unit tests for VerifierRegistryService."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from src.application.services.verifier_registry_service import VerifierRegistryService
from src.domain.errors.authorization import NotAdminError, NotAuthorizedVerifierError
from src.domain.errors.codes import ErrorCode
from src.domain.models.principal import Principal
from src.infrastructure.stubs.verifier_registry_stub import VerifierRegistryStub


@pytest.fixture
def service(
    admin: Principal, verifier_registry: VerifierRegistryStub
) -> VerifierRegistryService:
    return VerifierRegistryService(admin, verifier_registry)


class TestAddVerifier:
    """Tests for add_verifier()."""

    def test_admin_adds_verifier(
        self,
        service: VerifierRegistryService,
        admin: Principal,
        verifier: Principal,
    ) -> None:
        assert service.add_verifier(admin, verifier) is True
        assert service.is_verifier(verifier) is True

    def test_admin_may_add_itself(
        self, service: VerifierRegistryService, admin: Principal
    ) -> None:
        service.add_verifier(admin, admin)
        assert service.is_verifier(admin) is True

    def test_non_admin_rejected_and_registry_unchanged(
        self,
        service: VerifierRegistryService,
        verifier_registry: VerifierRegistryStub,
        verifier: Principal,
        outsider: Principal,
    ) -> None:
        with pytest.raises(NotAdminError) as exc_info:
            service.add_verifier(outsider, verifier)

        assert exc_info.value.code == ErrorCode.NOT_ADMIN
        assert verifier_registry.get_verifier_count() == 0
        assert service.is_verifier(verifier) is False

    def test_verifier_cannot_add_verifiers(
        self,
        service: VerifierRegistryService,
        admin: Principal,
        verifier: Principal,
        outsider: Principal,
    ) -> None:
        """Being a verifier grants no admin capability."""
        service.add_verifier(admin, verifier)

        with pytest.raises(NotAdminError):
            service.add_verifier(verifier, outsider)

        assert service.is_verifier(outsider) is False

    def test_re_adding_is_idempotent(
        self,
        service: VerifierRegistryService,
        verifier_registry: VerifierRegistryStub,
        admin: Principal,
        verifier: Principal,
    ) -> None:
        assert service.add_verifier(admin, verifier) is True
        assert service.add_verifier(admin, verifier) is True

        assert verifier_registry.get_verifier_count() == 1
        assert service.list_verifiers() == [verifier]

    def test_logs_verifier_added(
        self,
        admin: Principal,
        verifier: Principal,
    ) -> None:
        with capture_logs() as logs:
            service = VerifierRegistryService(admin, VerifierRegistryStub())
            service.add_verifier(admin, verifier)

        added = [entry for entry in logs if entry["event"] == "verifier_added"]
        assert len(added) == 1
        assert added[0]["target"] == str(verifier)
        assert added[0]["already_present"] is False


class TestChecks:
    """Tests for the admin and verifier predicates."""

    def test_is_admin(
        self,
        service: VerifierRegistryService,
        admin: Principal,
        outsider: Principal,
    ) -> None:
        assert service.is_admin(admin) is True
        assert service.is_admin(outsider) is False
        assert service.admin == admin

    def test_is_verifier_never_fails_for_unknown(
        self, service: VerifierRegistryService, outsider: Principal
    ) -> None:
        assert service.is_verifier(outsider) is False

    def test_require_verifier_uses_given_code(
        self, service: VerifierRegistryService, outsider: Principal
    ) -> None:
        with pytest.raises(NotAuthorizedVerifierError) as exc_info:
            service.require_verifier(
                outsider, code=ErrorCode.COMPLETION_NOT_AUTHORIZED_VERIFIER
            )

        assert exc_info.value.code == 2006

    def test_require_admin_uses_given_code(
        self, service: VerifierRegistryService, outsider: Principal
    ) -> None:
        with pytest.raises(NotAdminError) as exc_info:
            service.require_admin(outsider, code=ErrorCode.LICENSE_TYPE_NOT_ADMIN)

        assert exc_info.value.code == 2000
