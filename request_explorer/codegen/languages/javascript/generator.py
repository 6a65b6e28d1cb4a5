"""
JavaScript code generator implementation.

Generates a fetch() call with an options object.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.descriptor import RequestDescriptor
from ...core.escaping import escape_quotes
from ...core.generator import CodeGenerator

INDENT = "  "


class JavaScriptGenerator(CodeGenerator):
    """Code generator for the fetch API."""

    template_name = "fetch.js.j2"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "javascript"

    @property
    def display_name(self) -> str:
        return "JavaScript (fetch)"

    @property
    def file_extension(self) -> str:
        """Return JavaScript file extension."""
        return ".js"

    def get_template_directory(self) -> Optional[Path]:
        """Return the JavaScript templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        context = super().build_context(descriptor)
        context["options"] = self._option_entries(context)
        return context

    def _option_entries(self, context: Dict[str, Any]) -> List[str]:
        """
        Build the entries of the options object.

        Sections without content are never added, so the template can join
        the entries with commas and no trailing comma is left behind.
        """
        entries = [f'{INDENT}method: "{escape_quotes(context["method"])}"']

        headers = context["headers"]
        if headers:
            lines = [f"{INDENT}headers: {{"]
            lines.append(
                ",\n".join(
                    f'{INDENT * 2}"{escape_quotes(h.key)}": "{escape_quotes(h.value)}"'
                    for h in headers
                )
            )
            lines.append(f"{INDENT}}}")
            entries.append("\n".join(lines))

        body = context["body"]
        if body is not None:
            if context["json_body"]:
                entries.append(f"{INDENT}body: {body}")
            else:
                entries.append(f'{INDENT}body: "{escape_quotes(body)}"')

        return entries
