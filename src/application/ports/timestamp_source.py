"""Timestamp source protocol definition.

Defines the abstract interface for the monotonic counter the ledger uses
as a timestamp (e.g. block height). The ledger only stores the values
this source yields; it never computes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TimestampSourceProtocol(ABC):
    """Abstract protocol for a monotonic timestamp source."""

    @abstractmethod
    def current_timestamp(self) -> int:
        """Get the current counter value.

        Returns:
            Non-negative integer that never decreases between calls.
        """
        ...
