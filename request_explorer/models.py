"""
Request and history records.

These are the shapes stored on disk and shown in the CLI. The code generator
never sees them directly; it works on RequestDescriptor instead.
"""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class HttpMethod(Enum):
    """HTTP methods a request can use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def utc_now_iso() -> str:
    """Current time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class RequestItem:
    """A saved request as the user edits it."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    name: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: str = field(default_factory=utc_now_iso)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RequestItem":
        """Build a record from its JSON form, filling missing bookkeeping fields."""
        kwargs = {
            "method": str(data.get("method", HttpMethod.GET.value)),
            "url": str(data.get("url", "")),
            "headers": dict(data.get("headers") or {}),
            "body": data.get("body"),
            "name": data.get("name", ""),
        }
        for key in ("id", "created_at", "updated_at"):
            if data.get(key):
                kwargs[key] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def touch(self):
        """Mark the record as modified now."""
        self.updated_at = utc_now_iso()


@dataclass
class HistoryItem:
    """One executed request with its outcome."""

    id: str
    method: str
    url: str
    timestamp: str
    headers: List[Dict[str, str]] = field(default_factory=list)
    body: Optional[str] = None
    status: Optional[int] = None
    status_text: Optional[str] = None
    response_time: Optional[float] = None
    response_body: Optional[str] = None
    response_headers: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryItem":
        known = {f for f in cls.__dataclass_fields__}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
