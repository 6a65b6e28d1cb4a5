"""
Python code generator implementation.

Generates a script built on the requests library.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ...core.descriptor import RequestDescriptor
from ...core.generator import CodeGenerator


class PythonGenerator(CodeGenerator):
    """Code generator for Python requests scripts."""

    template_name = "requests.py.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def display_name(self) -> str:
        return "Python (requests)"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        context = super().build_context(descriptor)
        # requests.get, requests.post, ...
        context["call"] = descriptor.method.lower()
        # Parsed JSON goes through json=, plain text is sent as-is
        context["body_keyword"] = "json" if context["json_body"] else "data"
        return context
