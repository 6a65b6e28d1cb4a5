"""
Generator base class shared by every export target.

A generator turns one RequestDescriptor into source text by rendering a
Jinja2 template. The base class owns the rules every language shares: which
headers are written and whether the body is sent.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from .descriptor import RequestDescriptor
from .escaping import has_applicable_body, header_pairs, is_json_body
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code export errors."""

    pass


class CodeGenerator(ABC):
    """Base class for language generators.

    A generator holds no per-request state: ``render`` is a pure function
    of the descriptor it is given.
    """

    #: Template rendered by the default ``render`` implementation.
    template_name: Optional[str] = None

    def __init__(self):
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Registry tag of the language (e.g. 'go', 'curl')."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Label shown to users (e.g. 'Go (net/http)')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension used when the output is saved (e.g. '.go')."""
        pass

    @property
    def syntax_name(self) -> str:
        """Lexer name used when highlighting the output."""
        return self.language_name

    def get_template_directory(self) -> Optional[Path]:
        """
        Directory holding this generator's templates.

        Language packages override this; the base returns None, which gives
        an empty loader.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        return self._template_engine

    def build_context(self, descriptor: RequestDescriptor) -> Dict[str, Any]:
        """
        Build the template context shared by every language.

        ``body`` is None whenever the method does not carry one, so templates
        only ever test ``body is not none``.

        Args:
            descriptor: Request to render

        Returns:
            Template variables
        """
        send_body = has_applicable_body(descriptor.method, descriptor.body)
        return {
            "method": descriptor.method,
            "url": descriptor.url,
            "headers": header_pairs(descriptor.headers),
            "body": descriptor.body if send_body else None,
            "json_body": send_body and is_json_body(descriptor.body),
        }

    def render(self, descriptor: RequestDescriptor) -> str:
        """
        Produce source code issuing the described request.

        Args:
            descriptor: Request to render

        Returns:
            Source text without a trailing newline
        """
        if not self.template_name:
            raise GeneratorError(f"{type(self).__name__} defines no template")
        return self.render_template(self.template_name, self.build_context(descriptor))

    def validate_descriptor(self, descriptor: RequestDescriptor) -> List[str]:
        """
        Report inputs that render but probably not as the user intended.

        Nothing here blocks generation. A body on a method that carries none
        is dropped silently.

        Args:
            descriptor: Request to check

        Returns:
            Warning messages, possibly none
        """
        warnings = []

        skipped = len(descriptor.headers) - len(header_pairs(descriptor.headers))
        if skipped:
            warnings.append(f"{skipped} header(s) with a blank name skipped")

        return warnings

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Generated code together with its warnings and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code_result(
    generator: CodeGenerator, descriptor: RequestDescriptor
) -> GenerationResult:
    """
    Render with a generator and capture warnings, metadata or the failure.

    Args:
        generator: Generator for the target language
        descriptor: Request to render

    Returns:
        GenerationResult; ``success`` is False if rendering raised
    """
    try:
        warnings = generator.validate_descriptor(descriptor)
        code = generator.render(descriptor)

        sends_body = has_applicable_body(descriptor.method, descriptor.body)
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "method": descriptor.method,
            "header_count": len(header_pairs(descriptor.headers)),
            "has_body": sends_body,
            "json_body": sends_body and is_json_body(descriptor.body),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
