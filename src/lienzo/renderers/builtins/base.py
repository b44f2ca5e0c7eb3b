"""Shared helpers for the built-in renderers."""

from __future__ import annotations

from lienzo.config import get_render_config
from lienzo.utils.text import escape_html


def interpolate(value: str | None) -> str:
    """Prepare authoring content for embedding in markup.

    Escapes unless the active RenderConfig has escape_html disabled.
    None (an optional CMS field left blank) becomes the empty string.
    """
    if value is None:
        return ""
    if get_render_config().escape_html:
        return escape_html(value)
    return value
