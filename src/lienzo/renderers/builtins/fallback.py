"""Catch-all renderer.

Matches every node and renders nothing. It sits at FALLBACK_PRIORITY so any
renderer at a lower priority value, including caller renderers registered
after it at DEFAULT_PRIORITY, is consulted first. Unknown variants are
therefore skipped, not rejected.
"""

from __future__ import annotations

from lienzo.nodes import Node
from lienzo.renderers.protocol import FALLBACK_PRIORITY
from lienzo.utils.logger import get_logger

logger = get_logger(__name__)


class FallbackRenderer:
    """Render any node as the empty string."""

    priority = FALLBACK_PRIORITY

    __slots__ = ()

    def matches(self, node: Node) -> bool:
        return True

    def render(self, node: Node) -> str:
        logger.debug("No renderer for %s; dropping node", type(node).__name__)
        return ""
