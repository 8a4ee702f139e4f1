#!/usr/bin/env python3
"""
quickhttp usage demo

Runs GET, POST, PUT and DELETE against jsonplaceholder.typicode.com, then a
GET with custom headers against httpbin.org. Needs network access.

Usage:
    uv run python scripts/example_usage.py [--verbose]
"""

from __future__ import annotations

import argparse
import logging

from quickhttp import QuickHTTPError, delete, get, post, put

logger = logging.getLogger("example_usage")

POSTS_URL = "https://jsonplaceholder.typicode.com/posts"


def _show(label: str, call) -> None:
    logger.info(f"=== {label} ===")
    try:
        response = call()
    except QuickHTTPError as e:
        logger.error(f"{label} failed: {e}")
        return
    logger.info(f"Status: {response.status_code}")
    logger.info(f"Body: {response.text}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Demonstrate the quickhttp verb helpers")
    parser.add_argument("--verbose", action="store_true", help="Log request/response details")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    _show("GET", lambda: get(f"{POSTS_URL}/1"))
    _show("POST", lambda: post(POSTS_URL, {"title": "Test title", "body": "Test content", "userId": 1}))
    _show(
        "PUT",
        lambda: put(f"{POSTS_URL}/1", {"id": 1, "title": "Updated title", "body": "Updated content", "userId": 1}),
    )
    _show("DELETE", lambda: delete(f"{POSTS_URL}/1"))
    _show(
        "GET with custom headers",
        lambda: get(
            "https://httpbin.org/headers",
            {"User-Agent": "Custom-Client/1.0", "Authorization": "Bearer your-token-here"},
        ),
    )


if __name__ == "__main__":
    main()
