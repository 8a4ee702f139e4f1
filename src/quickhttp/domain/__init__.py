"""
Domain Layer

Contains:
- entities: RequestSpec, body variants, ResponseEnvelope
"""

from .entities import (
    BytesBody,
    HttpMethod,
    JsonBody,
    RequestSpec,
    ResponseEnvelope,
    TextBody,
    as_body,
)

__all__ = [
    "RequestSpec",
    "HttpMethod",
    "TextBody",
    "BytesBody",
    "JsonBody",
    "as_body",
    "ResponseEnvelope",
]
