"""
Infrastructure Layer - External Systems Integration

Contains:
- http: httpx-backed request executor and verb helpers
"""

from .http import RequestExecutor

__all__ = [
    "RequestExecutor",
]
