"""
Domain Entities

Request description and normalized response.
"""

from __future__ import annotations

from .request import (
    Body,
    BytesBody,
    HttpMethod,
    JsonBody,
    RequestSpec,
    TextBody,
    as_body,
)
from .response import ResponseEnvelope

__all__ = [
    # Request
    "RequestSpec",
    "HttpMethod",
    "Body",
    "TextBody",
    "BytesBody",
    "JsonBody",
    "as_body",
    # Response
    "ResponseEnvelope",
]
