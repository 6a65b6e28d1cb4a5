"""
Go code generator implementation.

Generates a main package issuing the request with net/http.
"""

from pathlib import Path
from typing import Optional

from ...core.generator import CodeGenerator


class GoGenerator(CodeGenerator):
    """Code generator for Go net/http programs."""

    template_name = "main.go.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def display_name(self) -> str:
        return "Go (net/http)"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"
