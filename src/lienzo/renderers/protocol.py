"""Renderer protocols for Lienzo.

ContentRenderer is the plugin interface: implement it to teach a registry how
to render a node variant. ASTRenderer is the document-level interface that
HtmlRenderer implements.

Thread Safety:
Renderers must be stateless. Per-render state (config, nesting depth) lives
in ContextVars. Multiple threads may call the same renderer instance
concurrently.

Example:
    >>> class QuoteRenderer:
    ...     priority = DEFAULT_PRIORITY
    ...
    ...     def __init__(self, registry):
    ...         self._registry = registry
    ...
    ...     def matches(self, node):
    ...         return isinstance(node, Quote)
    ...
    ...     def render(self, node):
    ...         return f"<blockquote>{self._registry.render_children(node.children)}</blockquote>"

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lienzo.nodes import Document, Node

DEFAULT_PRIORITY = 100
"""Priority of every built-in renderer and of caller renderers by default."""

FALLBACK_PRIORITY = 1000
"""Priority of the catch-all renderer; always loses to default-priority renderers."""


@runtime_checkable
class ContentRenderer(Protocol):
    """Protocol for node renderers.

    Attributes:
        priority: Resolution precedence. Lower values are consulted first;
            equal values keep registration order.

    Contract:
        - matches() MUST be a cheap, side-effect-free variant test
        - render() is only called with nodes for which matches() was True
        - Composite renderers MUST delegate children back to the registry
          instead of rendering child variants themselves

    """

    priority: int

    def matches(self, node: Node) -> bool:
        """Return True if this renderer handles ``node``."""
        ...

    def render(self, node: Node) -> str:
        """Render ``node`` to an HTML fragment."""
        ...


class ASTRenderer(Protocol):
    """Protocol for document renderers.

    The built-in ``HtmlRenderer`` conforms to this protocol.

    """

    def render(self, doc: Document) -> str:
        """Render a Document to a string."""
        ...
