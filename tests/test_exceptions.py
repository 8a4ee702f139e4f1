"""Tests for exceptions.py: full coverage of exception hierarchy."""

from __future__ import annotations

import pytest

from quickhttp.core.exceptions import (
    ErrorCategory,
    ErrorContext,
    QuickHTTPError,
    RequestConstructionError,
    ResponseReadError,
    SerializationError,
    TransportError,
)


class TestQuickHTTPError:
    def test_basic_creation(self):
        e = QuickHTTPError("test error")
        assert str(e) == "test error"
        assert e.category == ErrorCategory.TRANSPORT
        assert e.context == ErrorContext()

    def test_to_dict(self):
        ctx = ErrorContext(method="GET", url="http://example.test/", timeout=30.0)
        e = QuickHTTPError("fail", context=ctx)
        d = e.to_dict()
        assert d == {
            "error": "fail",
            "category": "transport",
            "method": "GET",
            "url": "http://example.test/",
            "timeout_seconds": 30.0,
        }

    def test_to_dict_minimal(self):
        d = QuickHTTPError("fail").to_dict()
        assert "method" not in d
        assert "url" not in d
        assert "timeout_seconds" not in d

    def test_context_is_frozen(self):
        ctx = ErrorContext(url="http://example.test/")
        with pytest.raises(AttributeError):
            ctx.url = "http://other.test/"


class TestSubclasses:
    @pytest.mark.parametrize(
        ("cls", "category", "prefix"),
        [
            (SerializationError, ErrorCategory.SERIALIZATION, "Failed to serialize request body"),
            (RequestConstructionError, ErrorCategory.REQUEST, "Failed to build request"),
            (TransportError, ErrorCategory.TRANSPORT, "Failed to send request"),
            (ResponseReadError, ErrorCategory.RESPONSE, "Failed to read response"),
        ],
    )
    def test_category_and_message(self, cls, category, prefix):
        e = cls("boom")
        assert isinstance(e, QuickHTTPError)
        assert e.category == category
        assert str(e) == f"{prefix}: boom"

    def test_distinct_kinds(self):
        with pytest.raises(TransportError):
            raise TransportError("connection refused")
        assert not issubclass(TransportError, ResponseReadError)
        assert not issubclass(SerializationError, RequestConstructionError)

    def test_context_carried(self):
        ctx = ErrorContext(method="POST", url="http://example.test/j")
        e = SerializationError("bad value", context=ctx)
        assert e.context.method == "POST"
        assert e.to_dict()["category"] == "serialization"
