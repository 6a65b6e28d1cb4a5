"""
Language registry for code export.

Maps each member of the closed TargetLanguage set to one generator class and
resolves tags and aliases to it.
"""

from enum import Enum
from typing import Dict, Type, Optional, Any, List, Union

from ..logging_config import get_logger
from .core.generator import CodeGenerator, GeneratorError

logger = get_logger(__name__)


class TargetLanguage(Enum):
    """Languages code can be exported to."""

    CURL = "curl"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    PHP = "php"
    CSHARP = "csharp"
    GO = "go"


class RegistryError(GeneratorError):
    """Invalid registration or lookup."""

    pass


class UnsupportedLanguageError(RegistryError):
    """Raised when a language tag is not one of the supported targets."""

    def __init__(self, language: Any, available: Optional[List[str]] = None):
        self.language = language
        self.available = available or []
        message = f"Language {language} not supported"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)


LanguageTag = Union[TargetLanguage, str]


class GeneratorRegistry:
    """Generator classes, their aliases and shared instances."""

    def __init__(self):
        self._generators: Dict[TargetLanguage, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, TargetLanguage] = {}
        self._instances: Dict[TargetLanguage, CodeGenerator] = {}

    def register(
        self,
        language: LanguageTag,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Bind a generator class to a target language.

        Args:
            language: TargetLanguage member or its tag
            generator_class: CodeGenerator subclass
            aliases: Extra names resolving to the same language
            replace: Overwrite an existing binding instead of keeping it

        Raises:
            RegistryError: On a non-generator class or a clashing alias
            UnsupportedLanguageError: If the tag is not a TargetLanguage
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        target = self._to_target(language)

        if target in self._generators and not replace:
            # First registration wins
            return

        self._generators[target] = generator_class
        self._instances.pop(target, None)

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == target.value:
                continue

            if not replace:
                if alias_key in {t.value for t in TargetLanguage}:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != target:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key].value}'"
                    )

            self._aliases[alias_key] = target

        logger.debug("Registered %s for %s", generator_class.__name__, target.value)

    def unregister(self, language: LanguageTag):
        """Drop a language's generator, cached instance and aliases."""
        target = self.resolve(language)
        self._generators.pop(target, None)
        self._instances.pop(target, None)

        for alias in [a for a, t in self._aliases.items() if t == target]:
            del self._aliases[alias]

    def resolve(self, language: LanguageTag) -> TargetLanguage:
        """
        Resolve an enum member, tag or alias to a registered TargetLanguage.

        String lookups ignore case and surrounding whitespace.

        Raises:
            UnsupportedLanguageError: If nothing is registered under that name
        """
        if isinstance(language, TargetLanguage):
            target = language
        elif isinstance(language, str):
            key = language.strip().lower()
            target = self._aliases.get(key)
            if target is None:
                try:
                    target = TargetLanguage(key)
                except ValueError:
                    target = None
        else:
            target = None

        if target is None or target not in self._generators:
            raise UnsupportedLanguageError(language, self.list_languages())
        return target

    def get_generator_class(self, language: LanguageTag) -> Type[CodeGenerator]:
        return self._generators[self.resolve(language)]

    def get_generator(self, language: LanguageTag) -> CodeGenerator:
        """
        Shared generator instance for a language.

        Generators keep no per-request state, so one instance per language is
        reused for every render.
        """
        target = self.resolve(language)
        generator = self._instances.get(target)
        if generator is None:
            generator = self._generators[target]()
            self._instances[target] = generator
        return generator

    def create_generator(self, language: LanguageTag) -> CodeGenerator:
        """Fresh, unshared generator instance."""
        return self.get_generator_class(language)()

    def list_languages(self) -> List[str]:
        """Registered tags in TargetLanguage declaration order."""
        return [t.value for t in TargetLanguage if t in self._generators]

    def get_aliases_for_language(self, language: LanguageTag) -> List[str]:
        target = self.resolve(language)
        return sorted(alias for alias, t in self._aliases.items() if t == target)

    def list_all_names(self) -> Dict[str, List[str]]:
        """Tag -> the tag followed by its aliases."""
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self.list_languages()
        }

    def is_supported(self, language: LanguageTag) -> bool:
        try:
            self.resolve(language)
        except UnsupportedLanguageError:
            return False
        return True

    def get_language_info(self, language: LanguageTag) -> Dict[str, Any]:
        """
        Describe a registered language.

        Returns:
            name, display_name, class, file_extension, aliases and module

        Raises:
            UnsupportedLanguageError: If the language is not registered
        """
        target = self.resolve(language)
        generator = self.get_generator(target)

        return {
            "name": generator.language_name,
            "display_name": generator.display_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(target),
            "module": type(generator).__module__,
        }

    @staticmethod
    def _to_target(language: LanguageTag) -> TargetLanguage:
        if isinstance(language, TargetLanguage):
            return language
        try:
            return TargetLanguage(str(language).lower())
        except ValueError:
            raise UnsupportedLanguageError(language) from None


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Process-wide registry with every built-in generator registered."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the generator for every TargetLanguage with its aliases."""
    from .languages.curl import CurlGenerator
    from .languages.javascript import JavaScriptGenerator
    from .languages.python import PythonGenerator
    from .languages.php import PhpGenerator
    from .languages.csharp import CSharpGenerator
    from .languages.go import GoGenerator

    registry.register(TargetLanguage.CURL, CurlGenerator, aliases=["shell"])
    registry.register(TargetLanguage.JAVASCRIPT, JavaScriptGenerator, aliases=["js", "fetch"])
    registry.register(TargetLanguage.PYTHON, PythonGenerator, aliases=["py", "requests"])
    registry.register(TargetLanguage.PHP, PhpGenerator)
    registry.register(TargetLanguage.CSHARP, CSharpGenerator, aliases=["c#", "cs"])
    registry.register(TargetLanguage.GO, GoGenerator, aliases=["golang"])


def get_generator(language: LanguageTag) -> CodeGenerator:
    return get_registry().get_generator(language)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: LanguageTag) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: LanguageTag) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Info for every supported language, keyed by tag."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
