"""
quickhttp - Small helpers for one-shot HTTP requests

One function per HTTP verb, each returning a normalized response.

Usage:
    from quickhttp import get, post

    response = get("https://jsonplaceholder.typicode.com/posts/1")
    print(response.status_code, response.text)

    response = post("https://jsonplaceholder.typicode.com/posts", {"title": "hello", "userId": 1})

Features:
    - GET, POST, PUT, DELETE, PATCH and HEAD helpers
    - str/bytes bodies sent verbatim, anything else sent as JSON
    - Content-Type: application/json added automatically for JSON bodies
    - 30 second default timeout covering the whole exchange
    - Normalized response: status code, headers, raw body, text
    - One exception per failure point (serialization, request, transport, read)
"""

from ._version import __version__
from .core import (
    ErrorCategory,
    ErrorContext,
    QuickHTTPError,
    RequestConstructionError,
    ResponseReadError,
    SerializationError,
    TransportError,
)
from .domain import (
    BytesBody,
    HttpMethod,
    JsonBody,
    RequestSpec,
    ResponseEnvelope,
    TextBody,
    as_body,
)
from .infrastructure.http import (
    RequestExecutor,
    configure_client,
    delete,
    get,
    get_client_config,
    head,
    patch,
    post,
    put,
)

__all__ = [
    "__version__",
    # Verb helpers
    "get",
    "post",
    "put",
    "delete",
    "patch",
    "head",
    # Executor and models
    "RequestExecutor",
    "RequestSpec",
    "HttpMethod",
    "TextBody",
    "BytesBody",
    "JsonBody",
    "as_body",
    "ResponseEnvelope",
    # Configuration
    "configure_client",
    "get_client_config",
    # Exceptions
    "QuickHTTPError",
    "ErrorContext",
    "ErrorCategory",
    "SerializationError",
    "RequestConstructionError",
    "TransportError",
    "ResponseReadError",
]
