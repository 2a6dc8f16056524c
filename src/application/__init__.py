"""
Application layer - Use cases and orchestration for the Credential Ledger.

This layer contains:
- Application services (verifier registry, applicant registry,
  license catalog, completion ledger)
- The CredentialLedger call surface
- Port definitions (abstract interfaces for infrastructure)
- DTOs returned to callers

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure (observability excepted), bootstrap
"""
