"""Paragraph and heading renderers.

Both are composites: they wrap whatever their children render to and leave
child variants entirely to the registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lienzo.errors import MalformedNodeError
from lienzo.nodes import Heading, Node, Paragraph
from lienzo.renderers.protocol import DEFAULT_PRIORITY

if TYPE_CHECKING:
    from lienzo.renderers.registry import RendererRegistry

_HEADING_LEVELS = frozenset(range(1, 7))


class ParagraphRenderer:
    """Render Paragraph nodes as <p>."""

    priority = DEFAULT_PRIORITY

    __slots__ = ("_registry",)

    def __init__(self, registry: RendererRegistry) -> None:
        self._registry = registry

    def matches(self, node: Node) -> bool:
        return isinstance(node, Paragraph)

    def render(self, node: Paragraph) -> str:
        inner = self._registry.render_children(node.children, node)
        return f"<p>{inner}</p>"


class HeadingRenderer:
    """Render Heading nodes as <h1> through <h6>.

    Raises:
        MalformedNodeError: If level is not an int between 1 and 6
    """

    priority = DEFAULT_PRIORITY

    __slots__ = ("_registry",)

    def __init__(self, registry: RendererRegistry) -> None:
        self._registry = registry

    def matches(self, node: Node) -> bool:
        return isinstance(node, Heading)

    def render(self, node: Heading) -> str:
        level = node.level
        if not isinstance(level, int) or isinstance(level, bool) or level not in _HEADING_LEVELS:
            raise MalformedNodeError("Heading", f"level must be 1-6, got {level!r}")

        inner = self._registry.render_children(node.children, node)
        return f"<h{level}>{inner}</h{level}>"
