"""
Pytest configuration and shared fixtures.
"""

import json

import pytest

from request_explorer.codegen import RequestDescriptor


@pytest.fixture
def post_json():
    """POST with a JSON content type and a JSON-shaped body."""
    return RequestDescriptor.create(
        "POST",
        "https://api.test/x",
        [("Content-Type", "application/json")],
        '{"a":1}',
    )


@pytest.fixture
def get_with_body():
    """GET carrying a body that must never be emitted."""
    return RequestDescriptor.create("GET", "https://x", [], "ignored")


@pytest.fixture
def bare_get():
    return RequestDescriptor.create("GET", "https://api.test/items")


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document to a temporary file and return its path."""

    def _write(name, payload):
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
