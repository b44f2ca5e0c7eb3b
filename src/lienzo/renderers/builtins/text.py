"""Text renderer with mark nesting.

Marks open in sequence order and close in reverse order, so any number of
marks nests into well-formed markup:

    Text("x", marks=(Mark("bold"), Mark("italic")))
    -> <strong><em>x</em></strong>
"""

from __future__ import annotations

from lienzo.config import get_render_config
from lienzo.nodes import BOLD, ITALIC, UNDERLINE, Mark, Node, Text
from lienzo.renderers.builtins.base import interpolate
from lienzo.renderers.protocol import DEFAULT_PRIORITY
from lienzo.stringbuilder import StringBuilder

MARK_TAGS: dict[str, str] = {
    BOLD: "strong",
    UNDERLINE: "u",
    ITALIC: "em",
}

# Unrecognized mark kinds
GENERIC_MARK_TAG = "span"


def mark_tag(mark: Mark) -> str:
    """Return the HTML tag name for a mark.

    Example:
        >>> mark_tag(Mark("bold"))
        'strong'
        >>> mark_tag(Mark("code"))
        'span'
    """
    return MARK_TAGS.get(mark.kind, GENERIC_MARK_TAG)


class TextRenderer:
    """Render Text nodes, wrapping the value in one tag per mark."""

    priority = DEFAULT_PRIORITY

    __slots__ = ()

    def matches(self, node: Node) -> bool:
        return isinstance(node, Text)

    def render(self, node: Text) -> str:
        value = node.value
        transformer = get_render_config().text_transformer
        if transformer is not None:
            value = transformer(value)

        # An absent mark list means unstyled text
        tags = [mark_tag(mark) for mark in node.marks or ()]

        sb = StringBuilder()
        sb.extend(f"<{tag}>" for tag in tags)
        sb.append(interpolate(value))
        sb.extend(f"</{tag}>" for tag in reversed(tags))
        return sb.build()
