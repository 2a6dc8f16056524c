"""Principal value object.

A Principal is the opaque identity of an operation's caller, resolved by
an external authentication mechanism (e.g. a wallet address). The ledger
trusts this resolution and performs no cryptographic checks of its own.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True, order=True)
class Principal:
    """Caller identity - immutable, equality-comparable and totally ordered.

    Attributes:
        address: Opaque identity string (e.g. "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM").
    """

    address: str

    def __post_init__(self) -> None:
        """Validate the address is a non-empty string."""
        if not isinstance(self.address, str) or not self.address.strip():
            raise ValueError("Principal address must be a non-empty string")

    def __str__(self) -> str:
        return self.address
