"""
Language-neutral request description for code generation.

Converts stored request records (headers as a mapping) into the normalized
RequestDescriptor (headers as an ordered list of pairs) that generators work
with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from ...models import RequestItem


@dataclass(frozen=True)
class Header:
    """A single header as it will be written out."""

    key: str
    value: str


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything a generator needs to know about one request."""

    method: str
    url: str
    headers: Tuple[Header, ...] = field(default_factory=tuple)
    body: Optional[str] = None

    @classmethod
    def create(
        cls,
        method: str,
        url: str,
        headers: Union[Mapping[str, str], Iterable[Any], None] = None,
        body: Optional[str] = None,
    ) -> "RequestDescriptor":
        """
        Build a descriptor from loosely shaped headers.

        Args:
            method: HTTP method
            url: Request URL
            headers: Mapping, Header objects, ``(key, value)`` tuples or
                ``{"key": ..., "value": ...}`` dicts
            body: Optional body text

        Returns:
            Immutable descriptor
        """
        return cls(method=method, url=url, headers=normalize_headers(headers), body=body)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": [{"key": h.key, "value": h.value} for h in self.headers],
            "body": self.body,
        }


def normalize_headers(
    headers: Union[Mapping[str, str], Iterable[Any], None],
) -> Tuple[Header, ...]:
    """Turn any supported header shape into an ordered tuple of Header."""
    if not headers:
        return ()

    if isinstance(headers, Mapping):
        return tuple(Header(str(key), str(value)) for key, value in headers.items())

    result = []
    for entry in headers:
        if isinstance(entry, Header):
            result.append(entry)
        elif isinstance(entry, Mapping):
            result.append(Header(str(entry.get("key", "")), str(entry.get("value", ""))))
        else:
            key, value = entry
            result.append(Header(str(key), str(value)))
    return tuple(result)


def convert_request_item(
    request: Union[RequestItem, Mapping[str, Any]],
) -> RequestDescriptor:
    """
    Convert a stored request record to a RequestDescriptor.

    Header order follows the mapping's iteration order. Bookkeeping fields
    (id, name, timestamps) are dropped.

    Args:
        request: RequestItem or a dict with the same keys

    Returns:
        RequestDescriptor for the generators
    """
    if isinstance(request, RequestItem):
        return RequestDescriptor.create(
            request.method, request.url, request.headers, request.body
        )

    return RequestDescriptor.create(
        str(request.get("method", "")),
        str(request.get("url", "")),
        request.get("headers"),
        request.get("body"),
    )
