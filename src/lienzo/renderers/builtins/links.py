"""Hyperlink renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lienzo.nodes import Hyperlink, Node
from lienzo.renderers.builtins.base import interpolate
from lienzo.renderers.protocol import DEFAULT_PRIORITY

if TYPE_CHECKING:
    from lienzo.renderers.registry import RendererRegistry


class HyperlinkRenderer:
    """Render Hyperlink nodes as <a href title>.

    The visible content is the rendered children, never the url itself.
    """

    priority = DEFAULT_PRIORITY

    __slots__ = ("_registry",)

    def __init__(self, registry: RendererRegistry) -> None:
        self._registry = registry

    def matches(self, node: Node) -> bool:
        return isinstance(node, Hyperlink)

    def render(self, node: Hyperlink) -> str:
        href = interpolate(node.url)
        title = interpolate(node.title)
        inner = self._registry.render_children(node.children, node)
        return f'<a href="{href}" title="{title}">{inner}</a>'
