"""
Python code generator module.

Generates requests-based scripts from a request descriptor.
"""

from .generator import PythonGenerator

__all__ = ["PythonGenerator"]
