"""
Infrastructure layer - External adapters for the Credential Ledger.

This layer contains:
- In-memory stubs for every application port
- Observability (structlog configuration, correlation IDs)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
