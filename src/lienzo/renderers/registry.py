"""Renderer registry for node dispatch and registration.

The registry holds an ordered list of ContentRenderer plugins and picks the
one responsible for a given node: renderers are consulted by ascending
priority, registration order breaking ties, and the first whose matches()
accepts the node wins.

Ordering rules:
    - Built-ins sit at DEFAULT_PRIORITY.
    - The catch-all FallbackRenderer sits at FALLBACK_PRIORITY, so a renderer
      registered later at DEFAULT_PRIORITY still wins for any node the
      built-ins do not claim.
    - To replace a built-in for its own variant, register with a priority
      below DEFAULT_PRIORITY; an equal priority loses to the earlier
      registered built-in.

Thread Safety:
Registration is not synchronized. Populate the registry first, then share it;
resolve() and render() are safe to call concurrently afterwards.

Example:
    >>> registry = create_default_registry()
    >>> registry.register(QuoteRenderer(registry))
    >>> registry.render(Paragraph(children=(Text("hi"),)))
    '<p>hi</p>'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextvars import ContextVar
from operator import attrgetter
from typing import TYPE_CHECKING

from lienzo.config import get_render_config
from lienzo.errors import MalformedNodeError, NestingDepthError, RendererResolutionError
from lienzo.stringbuilder import StringBuilder
from lienzo.utils.logger import get_logger

if TYPE_CHECKING:
    from lienzo.nodes import Node
    from lienzo.renderers.protocol import ContentRenderer

logger = get_logger(__name__)

# Current nesting depth of the active render in this context
_depth: ContextVar[int] = ContextVar("render_depth", default=0)

_by_priority = attrgetter("priority")


class RendererRegistry:
    """Ordered collection of node renderers.

    Renderers are appended, never removed. The priority-sorted view used by
    resolve() is computed lazily and rebuilt after each registration.
    """

    __slots__ = ("_renderers", "_ordered")

    def __init__(self, renderers: Iterable[ContentRenderer] = ()) -> None:
        """Initialize registry, optionally pre-populated.

        Args:
            renderers: Renderers to register, in order
        """
        self._renderers: list[ContentRenderer] = []
        self._ordered: tuple[ContentRenderer, ...] | None = None
        self.register_all(renderers)

    def register(self, renderer: ContentRenderer) -> RendererRegistry:
        """Append a renderer.

        Several renderers may claim the same variant; resolution order
        decides which one is used.

        Args:
            renderer: Object implementing the ContentRenderer protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If renderer lacks priority, matches or render
        """
        for attr in ("priority", "matches", "render"):
            if not hasattr(renderer, attr):
                msg = f"Renderer {type(renderer).__name__} missing {attr!r} attribute"
                raise TypeError(msg)
        if not isinstance(renderer.priority, int):
            msg = (
                f"Renderer {type(renderer).__name__} priority must be int, "
                f"got {type(renderer.priority).__name__}"
            )
            raise TypeError(msg)

        self._renderers.append(renderer)
        self._ordered = None
        logger.debug(
            "Registered %s (priority=%d, position=%d)",
            type(renderer).__name__,
            renderer.priority,
            len(self._renderers) - 1,
        )
        return self

    def register_all(self, renderers: Iterable[ContentRenderer]) -> RendererRegistry:
        """Register multiple renderers in iteration order.

        Returns:
            Self for chaining
        """
        for renderer in renderers:
            self.register(renderer)
        return self

    def resolve(self, node: Node) -> ContentRenderer:
        """Find the renderer for a node.

        Args:
            node: Any content node

        Returns:
            First renderer, in (priority, registration) order, that matches

        Raises:
            RendererResolutionError: If no renderer matches
        """
        for renderer in self._resolution_order():
            if renderer.matches(node):
                return renderer
        raise RendererResolutionError(type(node).__name__)

    def render(self, node: Node) -> str:
        """Resolve and render a single node.

        Composite renderers call this for each child, so this is also where
        nesting depth is tracked against RenderConfig.max_depth.

        Raises:
            NestingDepthError: If the node sits deeper than max_depth
            RendererResolutionError: If no renderer matches
        """
        depth = _depth.get() + 1
        limit = get_render_config().max_depth
        if depth > limit:
            raise NestingDepthError(depth, limit)

        token = _depth.set(depth)
        try:
            return self.resolve(node).render(node)
        finally:
            _depth.reset(token)

    def render_children(
        self, children: Iterable[Node] | None, parent: Node | None = None
    ) -> str:
        """Render child nodes in order and concatenate the results.

        Args:
            children: The parent's child sequence
            parent: Owning node, used for error messages

        Raises:
            MalformedNodeError: If children is None
        """
        if children is None:
            owner = type(parent).__name__ if parent is not None else "node"
            raise MalformedNodeError(owner, "children sequence is missing")

        sb = StringBuilder()
        for child in children:
            sb.append(self.render(child))
        return sb.build()

    @property
    def renderers(self) -> tuple[ContentRenderer, ...]:
        """All renderers in registration order."""
        return tuple(self._renderers)

    def _resolution_order(self) -> tuple[ContentRenderer, ...]:
        ordered = self._ordered
        if ordered is None:
            # sorted() is stable: equal priorities keep registration order
            ordered = tuple(sorted(self._renderers, key=_by_priority))
            self._ordered = ordered
        return ordered

    def __iter__(self) -> Iterator[ContentRenderer]:
        """Iterate renderers in resolution order."""
        return iter(self._resolution_order())

    def __contains__(self, renderer: object) -> bool:
        return any(r is renderer for r in self._renderers)

    def __len__(self) -> int:
        """Number of registered renderers."""
        return len(self._renderers)


def create_default_registry() -> RendererRegistry:
    """Create a registry with the built-in renderers installed.

    Returns:
        A new registry holding, in order: paragraph, hyperlink, text,
        heading, asset and the catch-all fallback. Registries are mutable,
        so every call returns a fresh instance.
    """
    from lienzo.renderers.builtins import (
        AssetRenderer,
        FallbackRenderer,
        HeadingRenderer,
        HyperlinkRenderer,
        ParagraphRenderer,
        TextRenderer,
    )

    registry = RendererRegistry()
    registry.register(ParagraphRenderer(registry))
    registry.register(HyperlinkRenderer(registry))
    registry.register(TextRenderer())
    registry.register(HeadingRenderer(registry))
    registry.register(AssetRenderer())
    registry.register(FallbackRenderer())
    return registry
