"""Completion repository protocol definition.

Defines the abstract interface for requirement completion records.
Completion records are overwritten on repeat, so the port exposes an
unconditional put() rather than insert_if_absent().
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.completion import CompletionKey, CompletionRecord


class CompletionRepositoryProtocol(ABC):
    """Abstract protocol for completion record storage."""

    @abstractmethod
    def get(self, key: CompletionKey) -> CompletionRecord | None:
        """Get the completion record for a triple.

        Args:
            key: The (applicant_id, license_type_id, requirement_id) key.

        Returns:
            CompletionRecord if found, None otherwise.
        """
        ...

    @abstractmethod
    def put(self, key: CompletionKey, record: CompletionRecord) -> None:
        """Store a completion record, replacing any existing one.

        Args:
            key: The completion key.
            record: The record to store.
        """
        ...
