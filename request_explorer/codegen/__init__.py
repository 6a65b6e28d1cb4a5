"""
Request Explorer Code Generation Module

Exports a request as ready-to-run code in several target languages.
"""

from typing import Any, Mapping, Union

from ..logging_config import get_logger
from ..models import RequestItem
from .registry import (
    GeneratorRegistry,
    LanguageTag,
    RegistryError,
    TargetLanguage,
    UnsupportedLanguageError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    generate_code_result,
)
from .core.descriptor import Header, RequestDescriptor, convert_request_item
from .core.escaping import escape_quotes, has_applicable_body, is_json_body

logger = get_logger(__name__)


def render(descriptor: RequestDescriptor, language: LanguageTag) -> str:
    """
    Render a request descriptor as source code.

    Args:
        descriptor: Request to export
        language: TargetLanguage member, tag or alias

    Returns:
        Generated source text

    Raises:
        UnsupportedLanguageError: If the language is not supported
    """
    generator = get_generator(language)
    logger.debug("Rendering %s %s as %s", descriptor.method, descriptor.url, generator.language_name)
    return generator.render(descriptor)


def generate_code(
    request: Union[RequestItem, Mapping[str, Any]], language: LanguageTag
) -> str:
    """
    Generate code for a stored request record.

    Args:
        request: RequestItem or dict with method, url, headers and body
        language: Target language

    Returns:
        Generated source text
    """
    return render(convert_request_item(request), language)


def generate_result(
    request: Union[RequestDescriptor, RequestItem, Mapping[str, Any]],
    language: LanguageTag,
) -> GenerationResult:
    """
    Generate code and collect warnings and metadata.

    Unsupported languages still raise; any other failure is reported in the
    returned result.
    """
    if not isinstance(request, RequestDescriptor):
        request = convert_request_item(request)
    return generate_code_result(get_generator(language), request)


__version__ = "0.1.0"

# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "RegistryError",
    "UnsupportedLanguageError",
    "TargetLanguage",
    "Header",
    "RequestDescriptor",
    "convert_request_item",
    "escape_quotes",
    "has_applicable_body",
    "is_json_body",
    "render",
    "generate_code",
    "generate_result",
    "generate_code_result",
    "get_generator",
    "get_registry",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
]
