"""Unit tests for correlation ID management.

Tests the correlation ID context management, the per-call scope and
the structlog processor.
"""

import re

from src.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestGenerateCorrelationId:
    """Tests for generate_correlation_id function."""

    def test_generate_returns_uuid_format(self) -> None:
        correlation_id = generate_correlation_id()

        # UUID4 format: xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
            re.IGNORECASE,
        )
        assert uuid_pattern.match(correlation_id) is not None

    def test_generate_returns_unique_ids(self) -> None:
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestCorrelationIdContext:
    """Tests for correlation ID context management."""

    def test_get_returns_empty_string_when_not_set(self) -> None:
        set_correlation_id("")
        assert get_correlation_id() == ""

    def test_set_and_get_correlation_id(self) -> None:
        set_correlation_id("test-correlation-id-123")

        assert get_correlation_id() == "test-correlation-id-123"


class TestCorrelationScope:
    """Tests for correlation_scope context manager."""

    def test_generates_id_and_restores_empty(self) -> None:
        with correlation_scope() as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id

        assert get_correlation_id() == ""

    def test_explicit_id(self) -> None:
        with correlation_scope("tx-42") as correlation_id:
            assert correlation_id == "tx-42"
            assert get_correlation_id() == "tx-42"

    def test_nested_scope_reuses_outer_id(self) -> None:
        with correlation_scope("outer"):
            with correlation_scope() as inner:
                assert inner == "outer"
            assert get_correlation_id() == "outer"

    def test_restores_previous_id(self) -> None:
        set_correlation_id("caller-id")

        with correlation_scope("scoped"):
            assert get_correlation_id() == "scoped"

        assert get_correlation_id() == "caller-id"


class TestCorrelationIdProcessor:
    """Tests for the structlog correlation ID processor."""

    def test_processor_adds_correlation_id_when_set(self) -> None:
        set_correlation_id("processor-test-id")

        event_dict: dict[str, object] = {"event": "test_event", "key": "value"}
        result = correlation_id_processor(None, "info", event_dict)

        assert result["correlation_id"] == "processor-test-id"
        assert result["event"] == "test_event"
        assert result["key"] == "value"

    def test_processor_keeps_bound_correlation_id(self) -> None:
        set_correlation_id("context-id")

        event_dict: dict[str, object] = {"event": "e", "correlation_id": "bound-id"}
        result = correlation_id_processor(None, "info", event_dict)

        assert result["correlation_id"] == "bound-id"

    def test_processor_skips_when_no_correlation_id(self) -> None:
        set_correlation_id("")

        event_dict: dict[str, object] = {"event": "test_event"}
        result = correlation_id_processor(None, "info", event_dict)

        assert "correlation_id" not in result
