"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import socket
import threading
import time
from dataclasses import dataclass

import pytest

from quickhttp.infrastructure.http.client import DEFAULT_TIMEOUT, _config

# ============================================================
# Configuration Fixtures
# ============================================================


@pytest.fixture(autouse=True)
def reset_client_config():
    """Restore module-level client defaults around every test."""
    saved = dict(_config)
    _config["timeout"] = DEFAULT_TIMEOUT
    yield
    _config.clear()
    _config.update(saved)


# ============================================================
# Request Fixtures
# ============================================================


@dataclass
class Item:
    name: str
    qty: int


@pytest.fixture
def base_url():
    """Base URL that never leaves the mocked transport."""
    return "http://example.test"


@pytest.fixture
def item():
    """A dataclass value usable as a JSON body."""
    return Item(name="widget", qty=2)


@pytest.fixture
def post_payload():
    """Payload mirroring the jsonplaceholder post shape."""
    return {"title": "Test title", "body": "Test content", "userId": 1}


# ============================================================
# Live Server Fixtures
# ============================================================


@pytest.fixture
def drip_server():
    """Local HTTP server that sends its response headers one line at a time."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]

    def serve() -> None:
        try:
            conn, _ = listener.accept()
        except OSError:
            return
        with conn:
            try:
                conn.recv(65536)
                conn.sendall(b"HTTP/1.1 200 OK\r\n")
                for i in range(5):
                    time.sleep(0.3)
                    conn.sendall(f"X-Drip-{i}: {i}\r\n".encode())
                conn.sendall(b"Content-Length: 0\r\n\r\n")
            except OSError:
                pass

    threading.Thread(target=serve, name="drip-server", daemon=True).start()
    yield f"http://127.0.0.1:{port}/"
    listener.close()
