"""
Domain Entity: RequestSpec

The input description of one HTTP call, plus the three body variants
a request can carry. Pure data; resolution happens in the executor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping


class HttpMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"


@dataclass(frozen=True, slots=True)
class TextBody:
    """Raw text, sent as its UTF-8 bytes."""

    text: str


@dataclass(frozen=True, slots=True)
class BytesBody:
    """Raw bytes, sent verbatim."""

    data: bytes


@dataclass(frozen=True, slots=True)
class JsonBody:
    """A structured value that is JSON-encoded before sending."""

    value: Any


Body: TypeAlias = TextBody | BytesBody | JsonBody


def as_body(value: Any) -> Body | None:
    """
    Wrap a plain Python value in the matching body variant.

    Args:
        value: None, str, bytes-like, an existing variant, or any
            JSON-encodable value

    Returns:
        The body variant, or None when there is no body
    """
    if value is None:
        return None
    if isinstance(value, (TextBody, BytesBody, JsonBody)):
        return value
    if isinstance(value, str):
        return TextBody(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesBody(bytes(value))
    return JsonBody(value)


@dataclass(slots=True)
class RequestSpec:
    """
    Everything needed to perform one HTTP call.

    A timeout of None or 0 means "use the configured default" (30s unless
    changed via configure_client). Headers are never modified in place.
    """

    method: HttpMethod | str
    url: str
    headers: Mapping[str, str] | None = None
    body: Body | None = None
    timeout: float | None = None
