"""Utility modules for Lienzo.

Provides:
- text: escape_html for markup-safe interpolation
- logger: get_logger for logging
"""

from lienzo.utils.logger import get_logger
from lienzo.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
