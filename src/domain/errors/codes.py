"""Numeric error codes reported by the ledger call surface.

Codes fall into two disjoint ranges:
- 1000-1004: verifier allowlist and applicant registry
- 2000-2009: license catalog and completion ledger

The same failure kind can carry different codes depending on the
operation that raised it (e.g. a non-admin caller is 1000 on
add_verifier but 2000 on add_license_type). Callers should match
on the code, not on the exception type.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes returned inside a failed LedgerResult."""

    # Verifier allowlist / applicant registry
    NOT_ADMIN = 1000
    INVALID_ID_DOCUMENT_HASH = 1001
    DUPLICATE_APPLICANT = 1002
    APPLICANT_NOT_FOUND = 1003
    NOT_AUTHORIZED_VERIFIER = 1004

    # License catalog / completion ledger
    LICENSE_TYPE_NOT_ADMIN = 2000
    DUPLICATE_LICENSE_TYPE = 2001
    REQUIREMENT_NOT_ADMIN = 2002
    LICENSE_TYPE_NOT_FOUND = 2003
    DUPLICATE_REQUIREMENT = 2004
    # 2005 unused: non-admin add_verifier reports NOT_ADMIN from the shared registry
    COMPLETION_NOT_AUTHORIZED_VERIFIER = 2006
    COMPLETION_LICENSE_TYPE_NOT_FOUND = 2007
    REQUIREMENT_NOT_FOUND = 2008
    COMPLETION_NOT_FOUND = 2009
