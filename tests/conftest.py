"""
Pytest configuration and shared fixtures for Credential Ledger tests.

Testing Standards:
- Unit tests go in tests/unit/, grouped by layer
- Integration tests go in tests/integration/
- Ledger fixtures are wired to in-memory stubs
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from src.application.services.credential_ledger import CredentialLedger
from src.domain.models.principal import Principal
from src.infrastructure.observability.correlation import set_correlation_id
from src.infrastructure.stubs.applicant_repository_stub import ApplicantRepositoryStub
from src.infrastructure.stubs.block_height_stub import BlockHeightStub
from src.infrastructure.stubs.completion_repository_stub import (
    CompletionRepositoryStub,
)
from src.infrastructure.stubs.license_catalog_repository_stub import (
    LicenseCatalogRepositoryStub,
)
from src.infrastructure.stubs.verifier_registry_stub import VerifierRegistryStub

ADMIN_ADDRESS = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
VERIFIER_ADDRESS = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
OUTSIDER_ADDRESS = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"
APPLICANT_ID = "123e4567-e89b-12d3-a456-426614174000"
LICENSE_TYPE_ID = "driver-license"
REQUIREMENT_ID = "age-requirement"


@pytest.fixture(autouse=True)
def reset_observability() -> Iterator[None]:
    """Restore default structlog config and clear correlation after each test."""
    yield
    structlog.reset_defaults()
    set_correlation_id("")


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def admin() -> Principal:
    """The ledger admin principal."""
    return Principal(ADMIN_ADDRESS)


@pytest.fixture
def verifier() -> Principal:
    """A principal the tests add as verifier."""
    return Principal(VERIFIER_ADDRESS)


@pytest.fixture
def outsider() -> Principal:
    """A principal that is neither admin nor verifier."""
    return Principal(OUTSIDER_ADDRESS)


@pytest.fixture
def id_document_hash() -> bytes:
    """A 32-byte id document digest."""
    return bytes(range(32))


@pytest.fixture
def block_height() -> BlockHeightStub:
    """Block counter starting at 123."""
    return BlockHeightStub(initial_height=123)


@pytest.fixture
def verifier_registry() -> VerifierRegistryStub:
    return VerifierRegistryStub()


@pytest.fixture
def applicant_repository() -> ApplicantRepositoryStub:
    return ApplicantRepositoryStub()


@pytest.fixture
def catalog_repository() -> LicenseCatalogRepositoryStub:
    return LicenseCatalogRepositoryStub()


@pytest.fixture
def completion_repository() -> CompletionRepositoryStub:
    return CompletionRepositoryStub()


@pytest.fixture
def ledger(
    admin: Principal,
    verifier_registry: VerifierRegistryStub,
    applicant_repository: ApplicantRepositoryStub,
    catalog_repository: LicenseCatalogRepositoryStub,
    completion_repository: CompletionRepositoryStub,
    block_height: BlockHeightStub,
) -> CredentialLedger:
    """A CredentialLedger wired to the stub fixtures above."""
    return CredentialLedger(
        admin=admin,
        verifier_registry=verifier_registry,
        applicant_repository=applicant_repository,
        catalog_repository=catalog_repository,
        completion_repository=completion_repository,
        timestamps=block_height,
    )
