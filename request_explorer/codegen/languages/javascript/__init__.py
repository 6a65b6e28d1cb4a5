"""
JavaScript code generator module.

Generates fetch() snippets from a request descriptor.
"""

from .generator import JavaScriptGenerator

__all__ = ["JavaScriptGenerator"]
