"""
cURL code generator module.

Generates curl command lines from a request descriptor.
"""

from .generator import CurlGenerator

__all__ = ["CurlGenerator"]
