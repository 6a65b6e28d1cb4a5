"""
String helpers shared by every language generator.

Covers quote escaping for string literals and the body rules: when a body is
sent at all, and when it is treated as JSON.
"""

from typing import Iterable, List, Optional

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def escape_quotes(text: str, quote_char: str = '"') -> str:
    """
    Escape a quote character with a backslash.

    Only occurrences of ``quote_char`` are touched; backslashes and every
    other character are left as they are.

    Args:
        text: Value to embed in a literal
        quote_char: The literal's delimiter, ``"`` or ``'``

    Returns:
        Escaped text
    """
    if quote_char not in ('"', "'"):
        return text
    return text.replace(quote_char, "\\" + quote_char)


def escape_shell_single_quotes(text: str) -> str:
    """Escape ``'`` for a POSIX single-quoted word (close, escaped quote, reopen)."""
    return text.replace("'", "'\\''")


def escape_verbatim_quotes(text: str) -> str:
    """Escape ``"`` for a C# verbatim (``@"..."``) string by doubling it."""
    return text.replace('"', '""')


def escape_raw_backticks(text: str) -> str:
    """Splice backticks into a Go raw string as interpreted-string concatenations."""
    return text.replace("`", '` + "`" + `')


def is_json_body(body: Optional[str]) -> bool:
    """A body is JSON-shaped when its first non-whitespace character is ``{``."""
    return body is not None and body.strip().startswith("{")


def has_applicable_body(method: str, body: Optional[str]) -> bool:
    """
    Check whether a body should be emitted.

    Only POST, PUT and PATCH carry a body. An empty string still counts.
    """
    return body is not None and method in BODY_METHODS


def is_blank_key(key: str) -> bool:
    return not key.strip()


def header_pairs(headers: Iterable) -> List:
    """Headers with a usable key, in their original order."""
    return [header for header in headers if not is_blank_key(header.key)]
