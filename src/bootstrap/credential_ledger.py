"""Bootstrap wiring for the credential ledger."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from src.application.services.credential_ledger import CredentialLedger
from src.bootstrap.logging import configure_ledger_logging
from src.config.ledger_config import LedgerConfig
from src.domain.models.principal import Principal
from src.infrastructure.stubs.applicant_repository_stub import ApplicantRepositoryStub
from src.infrastructure.stubs.block_height_stub import BlockHeightStub
from src.infrastructure.stubs.completion_repository_stub import (
    CompletionRepositoryStub,
)
from src.infrastructure.stubs.license_catalog_repository_stub import (
    LicenseCatalogRepositoryStub,
)
from src.infrastructure.stubs.verifier_registry_stub import VerifierRegistryStub


def build_credential_ledger(
    config: LedgerConfig,
    *,
    timestamps: BlockHeightStub | None = None,
) -> CredentialLedger:
    """Build a ledger wired to in-memory stubs.

    Args:
        config: Ledger configuration.
        timestamps: Optional block counter to share with the caller
            (e.g. tests that advance it); one is created otherwise.

    Returns:
        A fresh CredentialLedger with empty registries.
    """
    return CredentialLedger(
        admin=Principal(config.admin_principal),
        verifier_registry=VerifierRegistryStub(),
        applicant_repository=ApplicantRepositoryStub(),
        catalog_repository=LicenseCatalogRepositoryStub(),
        completion_repository=CompletionRepositoryStub(),
        timestamps=timestamps or BlockHeightStub(config.initial_block_height),
    )


def create_credential_ledger_from_env(env_file: Path | None = None) -> CredentialLedger:
    """Load .env, configure logging and build a ledger from the environment.

    Args:
        env_file: Optional explicit .env path; python-dotenv searches
            upward from the working directory otherwise.

    Returns:
        A fresh CredentialLedger.

    Raises:
        ValueError: If the environment does not describe a valid config.
    """
    load_dotenv(dotenv_path=env_file)
    config = LedgerConfig.from_environment()
    configure_ledger_logging(config)
    return build_credential_ledger(config)


__all__ = ["build_credential_ledger", "create_credential_ledger_from_env"]
