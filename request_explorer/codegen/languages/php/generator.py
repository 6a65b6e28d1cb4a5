"""
PHP code generator implementation.

Generates a script driving the cURL extension through curl_setopt_array().
"""

from pathlib import Path
from typing import Optional

from ...core.generator import CodeGenerator


class PhpGenerator(CodeGenerator):
    """Code generator for PHP cURL scripts."""

    template_name = "curl.php.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "php"

    @property
    def display_name(self) -> str:
        return "PHP (cURL)"

    @property
    def file_extension(self) -> str:
        """Return PHP file extension."""
        return ".php"

    def get_template_directory(self) -> Optional[Path]:
        """Return the PHP templates directory."""
        return Path(__file__).parent / "templates"
