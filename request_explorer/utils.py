"""Utility functions for loading and saving request records.

This module provides functions for loading request JSON from files and
streams with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import IO, Any

from .logging_config import get_logger
from .models import RequestItem

logger = get_logger(__name__)


class RequestLoaderError(Exception):
    """Custom exception for request loading errors."""

    pass


def parse_request_data(data: Any, source: str) -> RequestItem:
    """Validate decoded JSON and turn it into a RequestItem.

    Args:
        data: Decoded JSON value.
        source: Description used in error messages.

    Raises:
        RequestLoaderError: If the value is not a request object.
    """
    if not isinstance(data, dict):
        logger.error(f"Request in {source} is not a JSON object")
        raise RequestLoaderError(f"Request in {source} must be a JSON object")

    if not data.get("url"):
        logger.error(f"Request in {source} has no url")
        raise RequestLoaderError(f"Request in {source} has no url")

    headers = data.get("headers") or {}
    if isinstance(headers, list):
        if not all(isinstance(entry, dict) for entry in headers):
            raise RequestLoaderError(f"Header entries in {source} must be objects")
        # Accept the [{"key": ..., "value": ...}] shape as well
        headers = {entry.get("key", ""): entry.get("value", "") for entry in headers}
        data = {**data, "headers": headers}
    elif not isinstance(headers, dict):
        raise RequestLoaderError(f"Headers in {source} must be an object or a list")

    body = data.get("body")
    if body is not None and not isinstance(body, str):
        # Structured bodies are kept as their JSON text
        data = {**data, "body": json.dumps(body)}

    return RequestItem.from_dict(data)


def load_request_from_file(file_path: str | Path) -> RequestItem:
    """Load a request record from a local JSON file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        The parsed RequestItem.

    Raises:
        FileNotFoundError: If file doesn't exist.
        RequestLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load request from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise RequestLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise RequestLoaderError(f"Error reading file {file_path}: {e}") from e

    item = parse_request_data(data, str(file_path))
    logger.info(f"Successfully loaded request from {file_path}")
    return item


def load_request_from_stream(stream: IO[str], source: str = "<stdin>") -> RequestItem:
    """Load a request record from an open text stream."""
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise RequestLoaderError(f"Invalid JSON in {source}: {e}") from e
    return parse_request_data(data, source)


def save_request_to_file(item: RequestItem, file_path: str | Path) -> None:
    file_path = Path(file_path)
    try:
        with file_path.open("w", encoding="utf-8") as f:
            json.dump(item.to_dict(), f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise RequestLoaderError(f"Error writing file {file_path}: {e}") from e
    logger.info(f"Saved request to {file_path}")


def parse_header_arguments(values: list[str]) -> dict[str, str]:
    """Turn ``["Key: value", ...]`` into a header mapping.

    A value without a colon becomes a header with an empty value.
    """
    headers: dict[str, str] = {}
    for raw in values:
        key, _, value = raw.partition(":")
        headers[key.strip()] = value.strip()
    return headers
