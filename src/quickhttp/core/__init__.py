"""
Core module for quickhttp.

Provides:
- Unified exception hierarchy
"""

from .exceptions import (
    ErrorCategory,
    ErrorContext,
    QuickHTTPError,
    RequestConstructionError,
    ResponseReadError,
    SerializationError,
    TransportError,
)

__all__ = [
    "QuickHTTPError",
    "ErrorContext",
    "ErrorCategory",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
    "ResponseReadError",
]
