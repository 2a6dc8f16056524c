"""BLAKE3 id document hash service.

Derives the fixed-size id_document_hash stored on applicant records
from the raw bytes of an identity document, and verifies a document
against a stored hash.

Why BLAKE3:
- Fixed 32-byte output filling the record's hash field
- Fast on large scanned documents

Usage:
    from src.application.services.id_document_hash_service import (
        IdDocumentHashService,
    )

    service = IdDocumentHashService()
    digest = service.hash_document(scan_bytes)
    ledger.submit_applicant_info(caller, applicant_id, name, dob, digest)
"""

from __future__ import annotations

import hmac

import blake3

from src.application.services.base import LoggingMixin
from src.domain.errors.applicant import InvalidIdDocumentHashError
from src.domain.models.applicant import ID_DOCUMENT_HASH_MAX_SIZE


class IdDocumentHashService(LoggingMixin):
    """BLAKE3 hashing of applicant identity documents.

    Attributes:
        HASH_SIZE: Fixed output size in bytes (32)
    """

    HASH_SIZE: int = ID_DOCUMENT_HASH_MAX_SIZE

    def __init__(self) -> None:
        """Initialize the id document hash service."""
        self._init_logger(component="applicant_registry")

    def hash_document(self, content: bytes) -> bytes:
        """Hash raw document bytes to a 32-byte BLAKE3 digest.

        Args:
            content: Raw document bytes.

        Returns:
            32-byte BLAKE3 digest.
        """
        return blake3.blake3(content).digest()

    def verify_document(self, content: bytes, expected_hash: bytes) -> bool:
        """Verify that a document matches a stored hash.

        Uses hmac.compare_digest() for constant-time comparison.

        Args:
            content: Raw document bytes.
            expected_hash: Stored id_document_hash (at most 32 bytes).

        Returns:
            True if the document hashes to expected_hash. A shorter stored
            value never matches.

        Raises:
            InvalidIdDocumentHashError: If expected_hash exceeds 32 bytes.
        """
        if len(expected_hash) > self.HASH_SIZE:
            raise InvalidIdDocumentHashError(self.HASH_SIZE, len(expected_hash))

        matches = hmac.compare_digest(self.hash_document(content), expected_hash)
        if not matches:
            self._log_operation("verify_document").warning("id_document_hash_mismatch")
        return matches
