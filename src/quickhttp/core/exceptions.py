"""
Unified Exception Hierarchy for quickhttp.

Every failure of a request surfaces as exactly one of these exceptions.
The original cause is always chained (``raise ... from e``) and its message
is carried in ``str(error)``.

Exception Hierarchy:
    QuickHTTPError (base)
    ├── SerializationError        - structured body could not be JSON-encoded
    ├── RequestConstructionError  - invalid method, URL, header or timeout
    ├── TransportError            - DNS, connection, TLS, timeout
    └── ResponseReadError         - response body stream failed mid-read

A non-2xx HTTP status is NOT an error: it is reported on the response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories for error classification."""

    SERIALIZATION = "serialization"
    REQUEST = "request"
    TRANSPORT = "transport"
    RESPONSE = "response"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """The request an error belongs to."""

    method: str | None = None
    url: str | None = None
    timeout: float | None = None


class QuickHTTPError(Exception):
    """
    Base exception for all quickhttp errors.

    Provides:
    - Request context (method, URL, timeout)
    - Category classification
    - JSON-safe dict rendering
    """

    __slots__ = ("context", "category")

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        category: ErrorCategory = ErrorCategory.TRANSPORT,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.category = category

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
        }
        if self.context.method:
            result["method"] = self.context.method
        if self.context.url:
            result["url"] = self.context.url
        if self.context.timeout is not None:
            result["timeout_seconds"] = self.context.timeout
        return result


class SerializationError(QuickHTTPError):
    """Raised when a structured request body cannot be encoded as JSON."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Failed to serialize request body: {message}",
            context=context,
            category=ErrorCategory.SERIALIZATION,
        )


class RequestConstructionError(QuickHTTPError):
    """Raised when the request itself is malformed (method, URL, headers, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Failed to build request: {message}",
            context=context,
            category=ErrorCategory.REQUEST,
        )


class TransportError(QuickHTTPError):
    """Raised for DNS, connection, TLS and timeout failures."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Failed to send request: {message}",
            context=context,
            category=ErrorCategory.TRANSPORT,
        )


class ResponseReadError(QuickHTTPError):
    """Raised when the response body cannot be read completely."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            f"Failed to read response: {message}",
            context=context,
            category=ErrorCategory.RESPONSE,
        )
