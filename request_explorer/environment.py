"""Named environments and ``{{NAME}}`` placeholder resolution.

Any value in the form ``{{VARIABLE_NAME}}`` is replaced with the value of that
variable in the active environment. Unknown placeholders stay as they are.
"""

from __future__ import annotations

import json
import re
from dataclasses import replace
from pathlib import Path
from typing import Dict

from .logging_config import get_logger
from .models import RequestItem

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_.-]*)\s*\}\}")


class EnvironmentStoreError(Exception):
    """Raised for unknown environments and unreadable environment files."""

    pass


class EnvironmentStore:
    """In-memory set of named variable tables with one active table."""

    def __init__(
        self,
        environments: Dict[str, Dict[str, str]] | None = None,
        active: str | None = None,
    ) -> None:
        self._environments: Dict[str, Dict[str, str]] = {
            name: dict(variables) for name, variables in (environments or {}).items()
        }
        self._active: str | None = None
        if active is not None:
            self.set_active(active)
        logger.debug("EnvironmentStore initialized with %d environment(s)", len(self._environments))

    @property
    def active(self) -> str | None:
        return self._active

    @property
    def environments(self) -> Dict[str, Dict[str, str]]:
        return {name: dict(variables) for name, variables in self._environments.items()}

    def add_environment(self, name: str, variables: Dict[str, str] | None = None) -> None:
        """Create or replace an environment."""
        self._environments[name] = dict(variables or {})
        logger.info("Environment added: %s", name)

    def remove_environment(self, name: str) -> bool:
        """Delete an environment. Returns False when it did not exist."""
        if name not in self._environments:
            return False
        del self._environments[name]
        if self._active == name:
            self._active = None
        logger.info("Environment removed: %s", name)
        return True

    def set_active(self, name: str | None) -> None:
        """Select the environment used for resolution; ``None`` disables it."""
        if name is not None and name not in self._environments:
            raise EnvironmentStoreError(f"Unknown environment: {name}")
        self._active = name

    def set_variable(self, key: str, value: str, environment: str | None = None) -> None:
        target = self._target(environment)
        self._environments[target][key] = value

    def remove_variable(self, key: str, environment: str | None = None) -> bool:
        target = self._target(environment)
        return self._environments[target].pop(key, None) is not None

    def get_variables(self, environment: str | None = None) -> Dict[str, str]:
        """Variables of the given environment, or of the active one."""
        name = environment if environment is not None else self._active
        if name is None:
            return {}
        if name not in self._environments:
            raise EnvironmentStoreError(f"Unknown environment: {name}")
        return dict(self._environments[name])

    def resolve_variables(self, text: str) -> str:
        """Replace every known ``{{NAME}}`` in ``text``.

        Args:
            text: Text possibly containing placeholders.

        Returns:
            The text with known placeholders substituted.
        """
        if not text or "{{" not in text:
            return text

        variables = self.get_variables()

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name in variables:
                return variables[name]
            logger.debug("Unresolved placeholder left untouched: %s", name)
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(substitute, text)

    def resolve_request_item(self, item: RequestItem) -> RequestItem:
        """Copy of ``item`` with URL, header keys and values, and body resolved."""
        return replace(
            item,
            url=self.resolve_variables(item.url),
            headers={
                self.resolve_variables(key): self.resolve_variables(value)
                for key, value in item.headers.items()
            },
            body=self.resolve_variables(item.body) if item.body is not None else None,
        )

    def _target(self, environment: str | None) -> str:
        name = environment if environment is not None else self._active
        if name is None:
            raise EnvironmentStoreError("No environment selected")
        if name not in self._environments:
            raise EnvironmentStoreError(f"Unknown environment: {name}")
        return name

    # Persistence

    @classmethod
    def load(cls, file_path: str | Path) -> "EnvironmentStore":
        """Load environments from a JSON file.

        The file holds ``{"active": "name", "environments": {"name": {...}}}``.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            logger.warning("Environment file not found, starting empty: %s", file_path)
            return cls()

        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in environment file %s: %s", file_path, e)
            raise EnvironmentStoreError(f"Invalid JSON in environment file {file_path}: {e}") from e
        except OSError as e:
            raise EnvironmentStoreError(f"Error reading environment file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise EnvironmentStoreError(f"Environment file must contain a JSON object: {file_path}")

        store = cls(data.get("environments") or {})
        active = data.get("active")
        if active:
            store.set_active(active)
        logger.info("Loaded %d environment(s) from %s", len(store._environments), file_path)
        return store

    def save(self, file_path: str | Path) -> None:
        file_path = Path(file_path)
        payload = {"active": self._active, "environments": self._environments}
        try:
            with file_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise EnvironmentStoreError(f"Error writing environment file {file_path}: {e}") from e
