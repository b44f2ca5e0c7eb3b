"""Built-in node renderers.

Renderers:
- ParagraphRenderer: <p>
- HeadingRenderer: <h1>..<h6>
- TextRenderer: text with nested mark tags
- HyperlinkRenderer: <a href title>
- AssetRenderer: <img> for images, download link otherwise
- FallbackRenderer: catch-all, renders nothing

"""

from lienzo.renderers.builtins.assets import AssetRenderer, is_image
from lienzo.renderers.builtins.blocks import HeadingRenderer, ParagraphRenderer
from lienzo.renderers.builtins.fallback import FallbackRenderer
from lienzo.renderers.builtins.links import HyperlinkRenderer
from lienzo.renderers.builtins.text import GENERIC_MARK_TAG, MARK_TAGS, TextRenderer, mark_tag

__all__ = [
    "GENERIC_MARK_TAG",
    "MARK_TAGS",
    "AssetRenderer",
    "FallbackRenderer",
    "HeadingRenderer",
    "HyperlinkRenderer",
    "ParagraphRenderer",
    "TextRenderer",
    "is_image",
    "mark_tag",
]
