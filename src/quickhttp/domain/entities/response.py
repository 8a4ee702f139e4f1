"""
Domain Entity: ResponseEnvelope

The normalized result of one HTTP call. Any status code, including
4xx and 5xx, is a valid envelope.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """
    Normalized HTTP response.

    Attributes:
        status_code: HTTP status code
        headers: First value of every response header, keyed by canonical name
        body: Raw response bytes
        text: Body decoded as UTF-8 (invalid sequences replaced)
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    text: str = ""

    @property
    def ok(self) -> bool:
        """Whether the status code is 2xx."""
        return 200 <= self.status_code < 300
