"""
Jinja2 environment used by every language generator.

Templates live in a ``templates/`` directory beside each generator. The
environment is set up for source code rather than markup and exposes the
quoting filters the templates need.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, DictLoader, StrictUndefined

from .escaping import (
    escape_quotes,
    escape_raw_backticks,
    escape_shell_single_quotes,
    escape_verbatim_quotes,
)


class TemplateError(Exception):
    """A template is missing or failed to render."""

    pass


class TemplateEngine:
    """Loads and renders the templates of one generator."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Args:
            template_dir: Directory holding ``*.j2`` files; None for an empty loader
        """
        self.template_dir = template_dir
        self._env = self._build_environment()

    def _build_environment(self) -> Environment:
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        # Generated code is not markup: no autoescaping. Block tags on their
        # own line vanish entirely, and the template's final newline is dropped.
        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

        env.filters["quote"] = escape_quotes
        env.filters["shell_quote"] = escape_shell_single_quotes
        env.filters["verbatim"] = escape_verbatim_quotes
        env.filters["raw_string"] = escape_raw_backticks
        return env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Args:
            template_name: File name inside the template directory
            context: Template variables

        Returns:
            Rendered source text

        Raises:
            TemplateError: If the template cannot be loaded or rendered
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except Exception as e:
            raise TemplateError(f"Failed to render {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
