"""
Credential Ledger - Applicant verification and license requirement tracking

An authorization and record-tracking engine for credentialing workflows.
Applicants submit identity data, verifiers drawn from an admin-curated
allowlist attest to identities and to completed license requirements, and
any party can query verification and completion status.

Ledger Truths:
- Every caller is untrusted until an explicit authorization check passes
- Identity, license type and requirement records are write-once
- A rejected operation leaves every registry unchanged
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
