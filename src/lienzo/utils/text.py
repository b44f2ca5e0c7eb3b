"""Text processing utilities for Lienzo.

Example:
    >>> from lienzo.utils.text import escape_html
    >>> escape_html('<a title="x">')
    '&lt;a title=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes. Every attribute Lienzo emits
    is double-quoted, so the result is safe in both text and attribute
    positions.

    Args:
        text: Raw authoring content

    Returns:
        Escaped text

    Examples:
        >>> escape_html("Fish & Chips")
        'Fish &amp; Chips'
        >>> escape_html("it's")
        "it's"
    """
    return html_module.escape(text, quote=False).replace('"', "&quot;")
