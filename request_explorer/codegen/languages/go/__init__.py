"""
Go code generator module.

Generates net/http programs from a request descriptor.
"""

from .generator import GoGenerator

__all__ = ["GoGenerator"]
