"""HTML document renderer.

Walks a Document's top-level nodes in order, renders each through a
RendererRegistry and concatenates the fragments.

Error policy:
There is no per-node isolation. An error from any node aborts the whole
render instead of producing HTML with a silent gap. Unknown node variants
are not errors; the catch-all renderer skips them.

Thread Safety:
Config and nesting depth live in ContextVars, so multiple threads can share
one HtmlRenderer (and its registry) and call render() concurrently, provided
all add_renderer() calls happened first.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from lienzo.config import RenderConfig, render_config_context
from lienzo.errors import MalformedNodeError
from lienzo.renderers.registry import RendererRegistry, create_default_registry
from lienzo.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from lienzo.nodes import Document
    from lienzo.renderers.protocol import ContentRenderer


class HtmlRenderer:
    """Render Documents to HTML.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render(Document(content=(Paragraph(children=(Text("Hi"),)),)))
        '<p>Hi</p>'

        >>> # Custom node variants
        >>> renderer.add_renderer(QuoteRenderer(renderer.registry))

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance
        once registration is complete.
    """

    __slots__ = ("_registry", "_config")

    def __init__(
        self,
        registry: RendererRegistry | None = None,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            registry: Registry to render with (a fresh default registry if None).
                Injecting one lets several renderers share extensions.
            config: Config installed for each render() call. When None, the
                config already active in the caller's context is used.
        """
        self._registry = registry if registry is not None else create_default_registry()
        self._config = config

    @property
    def registry(self) -> RendererRegistry:
        return self._registry

    @property
    def config(self) -> RenderConfig | None:
        return self._config

    def add_renderer(self, renderer: ContentRenderer) -> HtmlRenderer:
        """Register a renderer with the underlying registry.

        Returns:
            Self for chaining
        """
        self._registry.register(renderer)
        return self

    def add_renderers(self, renderers: Iterable[ContentRenderer]) -> HtmlRenderer:
        """Register several renderers, preserving their order."""
        self._registry.register_all(renderers)
        return self

    def render(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Args:
            doc: Document root

        Returns:
            Concatenated HTML of every top-level node, in order

        Raises:
            MalformedNodeError: If the document or a node breaks its contract
            NestingDepthError: If nesting exceeds the configured max_depth
            RendererResolutionError: If the registry has no catch-all
        """
        if self._config is None:
            return self._render_content(doc)
        with render_config_context(self._config):
            return self._render_content(doc)

    def _render_content(self, doc: Document) -> str:
        if doc.content is None:
            raise MalformedNodeError("Document", "content sequence is missing")

        sb = StringBuilder()
        for node in doc.content:
            sb.append(self._registry.render(node))
        return sb.build()


def render_document(
    doc: Document,
    *,
    registry: RendererRegistry | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a document with a one-off HtmlRenderer.

    Prefer a long-lived HtmlRenderer when rendering many documents; this
    builds a fresh default registry whenever none is passed.
    """
    return HtmlRenderer(registry, config=config).render(doc)
