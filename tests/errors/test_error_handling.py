"""
Error handling tests for document resolution and pipelines.

Covers the error hierarchy and the rule that source failures come back as
values while lookup and aggregate failures are raised at the stage.
"""

import pytest

from fptour_app.errors import (
    EmptyAggregateError,
    FetchError,
    FileReadError,
    MarkupError,
    NotFoundError,
    ParseError,
    PipelineError,
    SourceConfigurationError,
    SourceError,
)
from fptour_app.sources import resolve
from fptour_app.transactions import average_by, find


class TestErrorClassification:
    """Test error classification system."""

    def test_source_error_hierarchy(self):
        """Test that source errors have proper hierarchy."""
        base_error = SourceError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        cause = ConnectionResetError("reset")
        fetch_error = FetchError("fetch failed", status_code=503, source="http://x", cause=cause)
        assert isinstance(fetch_error, ParseError)
        assert fetch_error.status_code == 503
        assert fetch_error.cause is cause
        assert fetch_error.recoverable is True

        file_error = FileReadError("read failed", path="/tmp/x.html")
        assert isinstance(file_error, ParseError)
        assert file_error.path == "/tmp/x.html"

        assert issubclass(MarkupError, ParseError)

    def test_configuration_error_not_recoverable(self):
        """Test configuration errors are outside ParseError."""
        error = SourceConfigurationError("bad", setting="timeout_seconds", value=-1)
        assert not isinstance(error, ParseError)
        assert error.recoverable is False
        assert error.value == -1

    def test_pipeline_error_hierarchy(self):
        """Test that pipeline errors have proper hierarchy."""
        not_found = NotFoundError("missing", description="customer == X", searched_count=3)
        assert isinstance(not_found, PipelineError)
        assert not_found.recoverable is False
        assert not_found.searched_count == 3

        empty = EmptyAggregateError("empty", aggregate="average_by", context={"stage": 2})
        assert isinstance(empty, PipelineError)
        assert empty.context == {"stage": 2}


class TestPropagationPolicy:
    """Test where errors surface."""

    def test_resolution_failures_are_values(self, tmp_path):
        """Test missing files never raise out of resolve."""
        result = resolve(str(tmp_path / "missing.html"))
        assert isinstance(result.error, ParseError)

    def test_lookup_failures_raise(self, transactions):
        """Test strict find raises at the stage."""
        with pytest.raises(NotFoundError):
            find(lambda t: t.customer_id == "NoSuchCo")(transactions)

    def test_aggregate_failures_raise(self):
        """Test averaging nothing raises at the stage."""
        with pytest.raises(EmptyAggregateError):
            average_by(lambda t: t.amount)([])
