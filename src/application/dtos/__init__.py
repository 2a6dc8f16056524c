"""Application DTOs (Data Transfer Objects).

These DTOs carry data across the ledger's call surface. They are
distinct from domain models (immutable business records).
"""

from src.application.dtos.ledger_result import LedgerResult
from src.application.dtos.license_progress import LicenseProgress

__all__: list[str] = ["LedgerResult", "LicenseProgress"]
