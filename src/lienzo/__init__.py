"""
Lienzo — Rich-text document to HTML renderer.

Turns a tree of typed content nodes (paragraphs, headings, marked-up text,
hyperlinks, embedded assets) as delivered by a headless CMS into an HTML
string. Rendering is driven by an extensible registry of per-node renderers.

Quick Start:
    >>> from lienzo import Document, Paragraph, Text, Mark, render
    >>> doc = Document(content=(
    ...     Paragraph(children=(Text("Hello", marks=(Mark("bold"),)),)),
    ... ))
    >>> render(doc)
    '<p><strong>Hello</strong></p>'

Custom Node Types:
    >>> from lienzo import HtmlRenderer, renderer
    >>>
    >>> @renderer(matches=lambda node: isinstance(node, Divider))
    ... def render_divider(node: Divider) -> str:
    ...     return "<hr />"
    >>>
    >>> html = HtmlRenderer().add_renderer(render_divider)
    >>> html.render(doc)

Overriding a built-in requires a priority below DEFAULT_PRIORITY; see
lienzo.renderers.registry for the ordering rules.

Installation:
    pip install lienzo               # Zero dependencies
"""

from lienzo.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from lienzo.errors import (
    LienzoError,
    MalformedNodeError,
    NestingDepthError,
    RendererResolutionError,
    RenderError,
    SerializationError,
)
from lienzo.nodes import (
    BOLD,
    ITALIC,
    UNDERLINE,
    Asset,
    AssetFile,
    Block,
    Document,
    EntityReference,
    Heading,
    Hyperlink,
    Mark,
    Node,
    Paragraph,
    Text,
)
from lienzo.renderers import (
    DEFAULT_PRIORITY,
    FALLBACK_PRIORITY,
    ASTRenderer,
    ContentRenderer,
    FunctionRenderer,
    HtmlRenderer,
    RendererRegistry,
    create_default_registry,
    render_document,
    renderer,
)
from lienzo.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(doc: Document, *, config: RenderConfig | None = None) -> str:
    """Render a document with the built-in renderers.

    Args:
        doc: Document root
        config: Optional render configuration

    Returns:
        HTML string

    Example:
        >>> render(Document(content=(Heading(level=2, children=(Text("Hi"),)),)))
        '<h2>Hi</h2>'
    """
    return render_document(doc, config=config)


__all__ = [
    # Version
    "__version__",
    # Rendering
    "render",
    "render_document",
    "HtmlRenderer",
    "ASTRenderer",
    # Registry
    "RendererRegistry",
    "create_default_registry",
    "ContentRenderer",
    "FunctionRenderer",
    "renderer",
    "DEFAULT_PRIORITY",
    "FALLBACK_PRIORITY",
    # Nodes
    "Node",
    "Document",
    "Paragraph",
    "Heading",
    "Hyperlink",
    "Text",
    "Mark",
    "Block",
    "Asset",
    "AssetFile",
    "EntityReference",
    "BOLD",
    "ITALIC",
    "UNDERLINE",
    # Config
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "LienzoError",
    "RenderError",
    "MalformedNodeError",
    "NestingDepthError",
    "RendererResolutionError",
    "SerializationError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
