"""
C# code generator implementation.

Generates a console program using HttpClient.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from ...core.descriptor import Header, RequestDescriptor
from ...core.generator import CodeGenerator

DEFAULT_CONTENT_TYPE = "application/json"


def find_content_type(headers: Iterable[Header]) -> Optional[str]:
    """Value of the first header named content-type, compared case-insensitively."""
    for header in headers:
        if header.key.lower() == "content-type":
            return header.value
    return None


def client_method_name(method: str) -> str:
    """``POST`` -> ``Post``: first character kept, the rest lower-cased."""
    return method[:1] + method[1:].lower()


class CSharpGenerator(CodeGenerator):
    """Code generator for C# HttpClient programs."""

    template_name = "Program.cs.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def display_name(self) -> str:
        return "C# (HttpClient)"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        context = super().build_context(descriptor)
        context["client_method"] = client_method_name(descriptor.method)
        content_type = find_content_type(descriptor.headers)
        if content_type is None:
            content_type = DEFAULT_CONTENT_TYPE
        context["content_type"] = content_type
        return context
