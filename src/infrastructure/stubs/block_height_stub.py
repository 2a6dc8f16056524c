"""Block height stub for testing and local runs.

In-memory implementation of TimestampSourceProtocol. Production
deployments read the chain's block height; this stub holds a counter
that only moves forward when told to.
"""

from __future__ import annotations

from src.application.ports.timestamp_source import TimestampSourceProtocol


class BlockHeightStub(TimestampSourceProtocol):
    """In-memory monotonic block height counter.

    The height does not advance on reads. Tests call advance() to
    simulate new blocks between operations.
    """

    def __init__(self, initial_height: int = 1) -> None:
        """Initialize the counter.

        Args:
            initial_height: Starting block height (non-negative).

        Raises:
            ValueError: If initial_height is negative.
        """
        if initial_height < 0:
            raise ValueError(
                f"initial_height must be non-negative, got {initial_height}"
            )
        self._height = initial_height

    def current_timestamp(self) -> int:
        """Get the current block height."""
        return self._height

    # Test helper methods

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward.

        Args:
            blocks: Number of blocks to advance (must be positive).

        Returns:
            The new block height.

        Raises:
            ValueError: If blocks is not positive.
        """
        if blocks < 1:
            raise ValueError(f"blocks must be positive, got {blocks}")
        self._height += blocks
        return self._height
