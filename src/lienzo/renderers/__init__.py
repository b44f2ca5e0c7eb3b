"""Lienzo renderers.

Renderers convert typed content nodes into HTML.

Components:
- RendererRegistry: ordered plugin list with priority-based resolution
- builtins: one renderer per node variant plus the catch-all
- HtmlRenderer: document walker on top of a registry

Thread Safety:
All renderers keep per-render state in ContextVars or locals.
Safe for concurrent use from multiple threads once registration is done.

"""

from lienzo.renderers.decorator import FunctionRenderer, renderer
from lienzo.renderers.html import HtmlRenderer, render_document
from lienzo.renderers.protocol import (
    DEFAULT_PRIORITY,
    FALLBACK_PRIORITY,
    ASTRenderer,
    ContentRenderer,
)
from lienzo.renderers.registry import RendererRegistry, create_default_registry

__all__ = [
    "DEFAULT_PRIORITY",
    "FALLBACK_PRIORITY",
    "ASTRenderer",
    "ContentRenderer",
    "FunctionRenderer",
    "HtmlRenderer",
    "RendererRegistry",
    "create_default_registry",
    "render_document",
    "renderer",
]
