"""Bounded, newest-first log of executed requests."""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, List

from .config import DEFAULT_MAX_HISTORY_ITEMS
from .logging_config import get_logger
from .models import HistoryItem, utc_now_iso

logger = get_logger(__name__)


class HistoryError(Exception):
    """Raised when the history file cannot be read or written."""

    pass


class HistoryStore:
    """Keeps at most ``max_items`` history entries, newest first."""

    def __init__(self, max_items: int = DEFAULT_MAX_HISTORY_ITEMS) -> None:
        self._items: List[HistoryItem] = []
        self.max_items = max_items
        self._last_id_ms = 0

    @property
    def history(self) -> List[HistoryItem]:
        return list(self._items)

    @property
    def has_history(self) -> bool:
        return bool(self._items)

    @property
    def sorted_history(self) -> List[HistoryItem]:
        """Entries ordered by timestamp, most recent first."""
        return sorted(self._items, key=lambda item: item.timestamp, reverse=True)

    def add_to_history(self, **fields: Any) -> HistoryItem:
        """Record a request.

        ``id`` and ``timestamp`` are assigned here; any other HistoryItem
        field may be passed.
        """
        fields.pop("id", None)
        fields.pop("timestamp", None)
        item = HistoryItem(id=self._next_id(), timestamp=utc_now_iso(), **fields)

        self._items.insert(0, item)
        self._trim()
        logger.debug("History item added: %s %s", item.method, item.url)
        return item

    def clear_history(self) -> None:
        self._items = []
        logger.info("History cleared")

    def get_history_item(self, item_id: str) -> HistoryItem | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def remove_history_item(self, item_id: str) -> bool:
        item = self.get_history_item(item_id)
        if item is None:
            return False
        self._items.remove(item)
        return True

    def delete_history_item(self, item_id: str) -> bool:
        return self.remove_history_item(item_id)

    def set_max_history_items(self, max_items: int) -> None:
        if max_items < 0:
            raise ValueError(f"max_items must be non-negative, got {max_items}")
        self.max_items = max_items
        self._trim()

    def search_history(self, query: str) -> List[HistoryItem]:
        """Case-insensitive match on URL or method. A blank query returns everything."""
        if not query.strip():
            return self.history
        needle = query.lower()
        return [
            item
            for item in self._items
            if needle in item.url.lower() or needle in item.method.lower()
        ]

    def add_tag_to_history_item(self, item_id: str, tag: str) -> None:
        item = self.get_history_item(item_id)
        if item is not None and tag not in item.tags:
            item.tags.append(tag)

    def remove_tag_from_history_item(self, item_id: str, tag: str) -> None:
        item = self.get_history_item(item_id)
        if item is not None:
            item.tags = [t for t in item.tags if t != tag]

    def _trim(self) -> None:
        if len(self._items) > self.max_items:
            del self._items[self.max_items :]

    def _next_id(self) -> str:
        # Two additions within the same millisecond still get distinct ids.
        now_ms = int(time.time() * 1000)
        if now_ms <= self._last_id_ms:
            now_ms = self._last_id_ms + 1
        self._last_id_ms = now_ms
        return f"hist_{now_ms}"

    # Persistence

    @classmethod
    def load(
        cls, file_path: str | Path, max_items: int = DEFAULT_MAX_HISTORY_ITEMS
    ) -> "HistoryStore":
        store = cls(max_items)
        file_path = Path(file_path)
        if not file_path.exists():
            logger.debug("History file not found, starting empty: %s", file_path)
            return store

        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise HistoryError(f"Invalid JSON in history file {file_path}: {e}") from e
        except OSError as e:
            raise HistoryError(f"Error reading history file {file_path}: {e}") from e

        if not isinstance(data, list):
            raise HistoryError(f"History file must contain a JSON array: {file_path}")

        try:
            store._items = [HistoryItem.from_dict(entry) for entry in data]
        except (TypeError, AttributeError) as e:
            raise HistoryError(f"Invalid entry in history file {file_path}: {e}") from e
        store._trim()
        logger.info("Loaded %d history item(s) from %s", len(store._items), file_path)
        return store

    def save(self, file_path: str | Path) -> None:
        file_path = Path(file_path)
        try:
            with file_path.open("w", encoding="utf-8") as f:
                json.dump([item.to_dict() for item in self._items], f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise HistoryError(f"Error writing history file {file_path}: {e}") from e
