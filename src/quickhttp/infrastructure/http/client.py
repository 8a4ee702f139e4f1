"""
HTTP Client Module - Thin request helpers over httpx.

This module provides:
- RequestExecutor: builds, sends and normalizes a single request
- One helper per HTTP verb (get, post, put, delete, patch, head)
- Body serialization (text, bytes, or JSON with automatic Content-Type)
- Consistent error handling with proper exceptions

Usage:
    from quickhttp.infrastructure.http.client import get, post

    response = get("https://api.example.com/items/1")
    print(response.status_code, response.text)

    # Dicts, lists and dataclasses are sent as JSON
    response = post("https://api.example.com/items", {"name": "widget"})

Every call opens its own httpx.Client and closes it before returning;
there is no shared client, retry or cache. Redirects are followed (at most 10)
and the timeout bounds the whole exchange, redirects included.
"""

from __future__ import annotations

import concurrent.futures
import dataclasses
import json
import logging
import threading
import time
from typing import TYPE_CHECKING, Any

import httpx

from quickhttp._version import __version__
from quickhttp.core.exceptions import (
    ErrorContext,
    RequestConstructionError,
    ResponseReadError,
    SerializationError,
    TransportError,
)
from quickhttp.domain.entities import (
    BytesBody,
    HttpMethod,
    JsonBody,
    RequestSpec,
    ResponseEnvelope,
    TextBody,
    as_body,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from quickhttp.domain.entities import Body

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
JSON_CONTENT_TYPE = "application/json"

# Global configuration
_config: dict[str, Any] = {
    "timeout": DEFAULT_TIMEOUT,
    "user_agent": f"quickhttp/{__version__}",
}


# =============================================================================
# Configuration
# =============================================================================


def configure_client(
    timeout: float | None = None,
    user_agent: str | None = None,
) -> None:
    """
    Configure HTTP client defaults.

    Args:
        timeout: Default request timeout in seconds (used when a request sets none)
        user_agent: User-Agent header value (used when a request sets none)
    """
    if timeout is not None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        _config["timeout"] = float(timeout)
    if user_agent is not None:
        _config["user_agent"] = user_agent


def get_client_config() -> dict[str, Any]:
    """
    Get current client configuration.

    Returns:
        Copy of the timeout and user_agent defaults
    """
    return dict(_config)


# =============================================================================
# Helpers
# =============================================================================


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    """Case-insensitive header presence check."""
    target = name.lower()
    return any(str(key).lower() == target for key in headers)


def _canonical_header_key(name: str) -> str:
    """Canonical header name: content-type -> Content-Type."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def _collapse_headers(headers: httpx.Headers) -> dict[str, str]:
    """Keep only the first value of each (possibly repeated) response header."""
    collapsed: dict[str, str] = {}
    for key, value in headers.multi_items():
        collapsed.setdefault(_canonical_header_key(key), value)
    return collapsed


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _encode_json(value: Any) -> bytes:
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_json_default,
    ).encode("utf-8")


def _remaining(deadline: float, context: ErrorContext) -> float:
    """Seconds left before the deadline; TransportError once it has passed."""
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        logger.error(f"Timeout for {context.url}: deadline of {context.timeout}s passed")
        raise TransportError(f"Request timeout after {context.timeout}s", context=context)
    return remaining


# =============================================================================
# Request Executor
# =============================================================================


class RequestExecutor:
    """
    Execute a RequestSpec and return a normalized ResponseEnvelope.

    Steps:
    1. Resolve timeout (None/0 -> configured default) and method
    2. Resolve body: TextBody/BytesBody verbatim, JsonBody JSON-encoded
    3. Send through a fresh httpx.Client bounded by an absolute deadline
    4. Read the full body, collapse headers, decode text

    The deadline covers connect, send, response headers and body together.
    The exchange runs on a worker thread; once the deadline passes the caller
    gets a TransportError and the client is closed underneath the worker.

    Raises:
        SerializationError: JsonBody value cannot be encoded
        RequestConstructionError: Invalid method, URL, header or timeout
        TransportError: DNS, connection, TLS or timeout failure
        ResponseReadError: Body stream failed mid-read
    """

    MAX_REDIRECTS = 10

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        """
        Initialize executor.

        Args:
            transport: Optional httpx transport (default: httpx's own)
        """
        self._transport = transport

    def execute(self, spec: RequestSpec) -> ResponseEnvelope:
        method = self._resolve_method(spec.method, ErrorContext(url=spec.url))
        timeout = self._resolve_timeout(spec.timeout, ErrorContext(method=method, url=spec.url))
        context = ErrorContext(method=method, url=spec.url, timeout=timeout)

        # Work on a copy so the caller's mapping is never touched
        headers = dict(spec.headers or {})
        content = self._resolve_body(as_body(spec.body), headers, context)
        if not _has_header(headers, "User-Agent"):
            headers["User-Agent"] = _config["user_agent"]

        logger.debug(f"Request: {method} {spec.url}")
        deadline = time.monotonic() + timeout

        with httpx.Client(
            timeout=timeout,
            transport=self._transport,
            follow_redirects=True,
            max_redirects=self.MAX_REDIRECTS,
        ) as client:
            try:
                request = client.build_request(method, spec.url, headers=headers, content=content)
            except (httpx.InvalidURL, AttributeError, TypeError, ValueError) as e:
                logger.exception(f"Invalid request {method} {spec.url}")
                raise RequestConstructionError(str(e), context=context) from e

            # Per-phase httpx timeouts never exceed what is left of the deadline
            request.extensions["timeout"] = httpx.Timeout(_remaining(deadline, context)).as_dict()
            status_code, response_headers, body = self._run_until_deadline(
                client,
                lambda: self._exchange(client, request, deadline, context),
                deadline,
                context,
            )

        envelope = ResponseEnvelope(
            status_code=status_code,
            headers=_collapse_headers(response_headers),
            body=body,
            text=body.decode("utf-8", errors="replace"),
        )
        logger.debug(f"Response: {envelope.status_code} {spec.url} ({len(body)} bytes)")
        return envelope

    @staticmethod
    def _run_until_deadline(
        client: httpx.Client,
        exchange: Callable[[], tuple[int, httpx.Headers, bytes]],
        deadline: float,
        context: ErrorContext,
    ) -> tuple[int, httpx.Headers, bytes]:
        """Run the exchange on a daemon thread and stop waiting at the deadline."""
        future: concurrent.futures.Future[tuple[int, httpx.Headers, bytes]] = concurrent.futures.Future()

        def worker() -> None:
            try:
                future.set_result(exchange())
            except Exception as e:
                future.set_exception(e)

        threading.Thread(target=worker, name="quickhttp-exchange", daemon=True).start()
        try:
            return future.result(timeout=max(deadline - time.monotonic(), 0.0))
        except concurrent.futures.TimeoutError as e:
            logger.error(f"Timeout for {context.url}: deadline of {context.timeout}s passed")
            client.close()
            raise TransportError(f"Request timeout after {context.timeout}s", context=context) from e

    @classmethod
    def _exchange(
        cls,
        client: httpx.Client,
        request: httpx.Request,
        deadline: float,
        context: ErrorContext,
    ) -> tuple[int, httpx.Headers, bytes]:
        try:
            response = client.send(request, stream=True)
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            logger.exception(f"Invalid request {context.method} {context.url}")
            raise RequestConstructionError(str(e), context=context) from e
        except httpx.TimeoutException as e:
            logger.exception(f"Timeout for {context.url}")
            raise TransportError(f"Request timeout after {context.timeout}s", context=context) from e
        except (httpx.TransportError, httpx.TooManyRedirects) as e:
            logger.exception(f"Connection failed for {context.url}: {e}")
            raise TransportError(str(e) or type(e).__name__, context=context) from e

        try:
            _remaining(deadline, context)
            body = cls._read_body(response, deadline, context)
        finally:
            response.close()
        return response.status_code, response.headers, body

    @staticmethod
    def _resolve_timeout(timeout: float | None, context: ErrorContext) -> float:
        if timeout is None or timeout == 0:
            return _config["timeout"]
        if timeout < 0:
            raise RequestConstructionError(f"timeout must be positive, got {timeout!r}", context=context)
        return float(timeout)

    @staticmethod
    def _resolve_method(method: HttpMethod | str, context: ErrorContext) -> str:
        if isinstance(method, HttpMethod):
            return method.value
        try:
            return HttpMethod(method.upper()).value
        except (AttributeError, ValueError) as e:
            raise RequestConstructionError(f"unsupported method {method!r}", context=context) from e

    @staticmethod
    def _resolve_body(body: Body | None, headers: dict[str, str], context: ErrorContext) -> bytes | None:
        """Turn the body variant into bytes, adding Content-Type for JSON."""
        match body:
            case None:
                return None
            case TextBody(text):
                return text.encode("utf-8")
            case BytesBody(data):
                return data
            case JsonBody(value):
                try:
                    content = _encode_json(value)
                except (TypeError, ValueError, RecursionError) as e:
                    logger.warning(f"Cannot serialize request body for {context.url}: {e}")
                    raise SerializationError(str(e), context=context) from e
                if not _has_header(headers, "Content-Type"):
                    headers["Content-Type"] = JSON_CONTENT_TYPE
                return content

    @staticmethod
    def _read_body(response: httpx.Response, deadline: float, context: ErrorContext) -> bytes:
        """Read the whole body, enforcing the request deadline between chunks."""
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                _remaining(deadline, context)
        except httpx.TimeoutException as e:
            logger.exception(f"Timeout reading response from {context.url}")
            raise TransportError(f"Request timeout after {context.timeout}s", context=context) from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.exception(f"Failed reading response from {context.url}: {e}")
            raise ResponseReadError(str(e) or type(e).__name__, context=context) from e
        return b"".join(chunks)


# =============================================================================
# Verb Helpers
# =============================================================================


def _request(
    method: HttpMethod,
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> ResponseEnvelope:
    spec = RequestSpec(method=method, url=url, headers=headers, body=as_body(body), timeout=timeout)
    return RequestExecutor().execute(spec)


def get(url: str, headers: Mapping[str, str] | None = None, *, timeout: float | None = None) -> ResponseEnvelope:
    """Send a GET request. Redirects are followed; the envelope describes the final response."""
    return _request(HttpMethod.GET, url, headers=headers, timeout=timeout)


def post(
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> ResponseEnvelope:
    """
    Send a POST request.

    Args:
        url: The URL to request
        body: str/bytes sent verbatim; any other value is sent as JSON
        headers: Additional headers
        timeout: Request timeout (uses configured default if None)
    """
    return _request(HttpMethod.POST, url, body=body, headers=headers, timeout=timeout)


def put(
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> ResponseEnvelope:
    """Send a PUT request. Body handling matches post()."""
    return _request(HttpMethod.PUT, url, body=body, headers=headers, timeout=timeout)


def delete(url: str, headers: Mapping[str, str] | None = None, *, timeout: float | None = None) -> ResponseEnvelope:
    """Send a DELETE request."""
    return _request(HttpMethod.DELETE, url, headers=headers, timeout=timeout)


def patch(
    url: str,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> ResponseEnvelope:
    """Send a PATCH request. Body handling matches post()."""
    return _request(HttpMethod.PATCH, url, body=body, headers=headers, timeout=timeout)


def head(url: str, headers: Mapping[str, str] | None = None, *, timeout: float | None = None) -> ResponseEnvelope:
    """Send a HEAD request. The envelope body is empty."""
    return _request(HttpMethod.HEAD, url, headers=headers, timeout=timeout)
