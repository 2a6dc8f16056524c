"""Ledger call result DTO.

Every fallible ledger operation returns a LedgerResult: either a
success carrying a value or a failure carrying a numeric ErrorCode.
Domain failures never escape the call surface as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.domain.errors.codes import ErrorCode
from src.domain.exceptions import LedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    """Discriminated result of a ledger operation.

    Exactly one of value (on success) or error (on failure) is meaningful.

    Attributes:
        ok: True for success, False for failure.
        value: Operation value on success, None on failure.
        error: Error code on failure, None on success.
        detail: Structured error payload on failure.
    """

    ok: bool
    value: T | None = None
    error: ErrorCode | None = None
    detail: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def success(cls, value: T) -> LedgerResult[T]:
        """Build a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> LedgerResult[T]:
        """Build a failed result from a domain error."""
        return cls(ok=False, error=error.code, detail=error.to_dict())

    @property
    def code(self) -> int | None:
        """Numeric error code, or None on success."""
        return int(self.error) if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value of a successful result.

        Raises:
            ValueError: If the result is a failure.
        """
        if not self.ok:
            raise ValueError(f"unwrap() on failed result: {self.error!r}")
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Serialize as {"type": "ok"|"err", "value": ...}."""
        if self.ok:
            return {"type": "ok", "value": self.value}
        return {"type": "err", "value": self.code, "detail": dict(self.detail)}
