"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    generate_code_result,
)
from .descriptor import (
    Header,
    RequestDescriptor,
    convert_request_item,
    normalize_headers,
)
from .escaping import (
    BODY_METHODS,
    escape_quotes,
    escape_raw_backticks,
    escape_shell_single_quotes,
    escape_verbatim_quotes,
    has_applicable_body,
    header_pairs,
    is_json_body,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code_result",
    # Request description
    "Header",
    "RequestDescriptor",
    "convert_request_item",
    "normalize_headers",
    # Shared helpers
    "BODY_METHODS",
    "escape_quotes",
    "escape_raw_backticks",
    "escape_shell_single_quotes",
    "escape_verbatim_quotes",
    "has_applicable_body",
    "header_pairs",
    "is_json_body",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
