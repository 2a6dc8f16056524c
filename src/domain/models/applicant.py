"""Applicant identity record domain model.

This module defines the ApplicantRecord entity stored in the applicant
registry, keyed by a caller-supplied opaque applicant id.

Invariants:
- At most one record per applicant id, ever (write-once creation)
- verified transitions False -> True and never reverts
- Records are never deleted

Developer Golden Rules:
1. IMMUTABILITY - ApplicantRecord is a frozen dataclass
2. TRANSITION BY COPY - Verification returns a new record via with_verification()
3. NO CALENDAR CHECKS - date_of_birth is stored verbatim
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from src.domain.errors.applicant import InvalidIdDocumentHashError
from src.domain.models.principal import Principal

# Upper bound of the stored hash buffer (a BLAKE3 or SHA-256 digest fills it)
ID_DOCUMENT_HASH_MAX_SIZE: int = 32


@dataclass(frozen=True, eq=True)
class ApplicantRecord:
    """Identity data submitted by an applicant.

    Attributes:
        applicant_id: Opaque caller-supplied identifier (format not validated).
        owner: The principal that submitted the record.
        full_name: Applicant's full name.
        date_of_birth: ISO date string, not validated for calendar correctness.
        id_document_hash: Digest of the applicant's identity document
            (at most 32 bytes; shorter values are stored verbatim).
        verified: Whether an authorized verifier has attested the identity.
        verification_timestamp: Block height of the latest verification
            (None until verified).
    """

    applicant_id: str
    owner: Principal
    full_name: str
    date_of_birth: str
    id_document_hash: bytes
    verified: bool = field(default=False)
    verification_timestamp: int | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate the document hash type and size.

        Raises:
            TypeError: If id_document_hash is not bytes.
            InvalidIdDocumentHashError: If id_document_hash exceeds 32 bytes.
        """
        if not isinstance(self.id_document_hash, bytes):
            raise TypeError("id_document_hash must be bytes")
        if len(self.id_document_hash) > ID_DOCUMENT_HASH_MAX_SIZE:
            raise InvalidIdDocumentHashError(
                ID_DOCUMENT_HASH_MAX_SIZE, len(self.id_document_hash)
            )

    def with_verification(self, timestamp: int) -> ApplicantRecord:
        """Create a verified copy of this record.

        Re-verifying an already verified record is allowed and refreshes
        the timestamp.

        Args:
            timestamp: Block height at which verification happened.

        Returns:
            New ApplicantRecord with verified=True and the given timestamp.
        """
        return replace(self, verified=True, verification_timestamp=timestamp)
