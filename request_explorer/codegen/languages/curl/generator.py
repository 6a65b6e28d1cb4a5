"""
cURL command generator implementation.

Generates a shell command line with one continuation line per header.
"""

from pathlib import Path
from typing import Optional

from ...core.generator import CodeGenerator


class CurlGenerator(CodeGenerator):
    """Code generator for curl command lines."""

    template_name = "command.sh.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "curl"

    @property
    def display_name(self) -> str:
        return "cURL"

    @property
    def file_extension(self) -> str:
        """Return shell script file extension."""
        return ".sh"

    @property
    def syntax_name(self) -> str:
        return "bash"

    def get_template_directory(self) -> Optional[Path]:
        """Return the curl templates directory."""
        return Path(__file__).parent / "templates"
