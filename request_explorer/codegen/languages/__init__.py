"""
Language-specific code generators.

One package per target language, each with its generator class and the
Jinja2 templates it renders.
"""

from .curl import CurlGenerator
from .javascript import JavaScriptGenerator
from .python import PythonGenerator
from .php import PhpGenerator
from .csharp import CSharpGenerator
from .go import GoGenerator

__all__ = [
    "CurlGenerator",
    "JavaScriptGenerator",
    "PythonGenerator",
    "PhpGenerator",
    "CSharpGenerator",
    "GoGenerator",
]
