"""Logging setup shared by every request_explorer module.

Modules obtain their logger with ``get_logger(__name__)``. Handlers are only
installed by ``setup_logging`` so that library users keep control of output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "request_explorer"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``request_explorer`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str | int = "WARNING") -> logging.Logger:
    """Install a rich stderr handler on the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Level name (``"DEBUG"``, ``"INFO"``...) or numeric level.

    Returns:
        The package root logger.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not _configured:
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.propagate = False
        _configured = True

    return root
