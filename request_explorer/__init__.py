"""
Request Explorer

Author HTTP requests, resolve environment placeholders, send them, keep a
history, and export them as code in several languages.
"""

__version__ = "0.1.0"
