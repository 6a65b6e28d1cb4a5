"""
PHP code generator module.

Generates cURL-extension scripts from a request descriptor.
"""

from .generator import PhpGenerator

__all__ = ["PhpGenerator"]
