"""
C# code generator module.

Generates HttpClient console programs from a request descriptor.
"""

from .generator import CSharpGenerator, client_method_name, find_content_type

__all__ = ["CSharpGenerator", "client_method_name", "find_content_type"]
