"""Typed content nodes for Lienzo.

All content nodes are frozen dataclasses with slots for:
- Immutability: one tree can be rendered from many threads at once
- Memory efficiency: __slots__ keeps large documents small
- Pattern matching: variants dispatch on class, never on a tag string

Node Hierarchy:
Node (base)
├── Text
├── Mark
├── Paragraph
├── Heading
├── Hyperlink
├── Asset
└── Block

Document is the root container and deliberately not a Node: it is only
ever the entry point of a render.

Custom variants:
Subclass Node and register a renderer that matches the new class.

    >>> @dataclass(frozen=True, slots=True)
    ... class Quote(Node):
    ...     children: tuple[Node, ...]

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

BOLD = "bold"
ITALIC = "italic"
UNDERLINE = "underline"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all content nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Mark(Node):
    """Inline style annotation attached to a Text node.

    ``kind`` is an arbitrary string. bold, italic and underline have
    dedicated HTML tags; any other kind renders as a generic span.

    """

    kind: str


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text with zero or more marks.

    HTML: <strong><em>value</em></strong> for marks (bold, italic)

    """

    value: str
    marks: tuple[Mark, ...] = ()


@dataclass(frozen=True, slots=True)
class Hyperlink(Node):
    """Hyperlink wrapping inline content.

    HTML: <a href="url" title="title">children</a>

    """

    url: str
    title: str
    children: tuple[Node, ...]


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    HTML: <p>children</p>

    """

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading block, level 1 through 6.

    HTML: <h2>children</h2>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Node, ...]


# =============================================================================
# Embedded entities
# =============================================================================


@dataclass(frozen=True, slots=True)
class AssetFile:
    """File metadata of an asset as delivered by the CMS."""

    url: str
    content_type: str | None = None
    file_name: str | None = None


@dataclass(frozen=True, slots=True)
class Asset(Node):
    """Media resource (image or downloadable file).

    Assets live outside the document; a Block points at one. An already
    resolved Asset may also appear directly in a tree.

    """

    title: str
    file: AssetFile | None


@dataclass(frozen=True, slots=True)
class EntityReference:
    """Unresolved link to an external entity.

    Turned into an Asset by ``RenderConfig.asset_resolver`` at render time.

    """

    id: str
    link_type: str = "Asset"


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Embedded block pointing at an external entity.

    HTML: depends on the target; image assets become <img />, other
    assets become a download link.

    """

    target: object


# =============================================================================
# Root
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """Root container holding the ordered top-level nodes."""

    content: tuple[Node, ...]


# Type aliases
Composite: TypeAlias = Paragraph | Heading | Hyperlink

Content: TypeAlias = Text | Mark | Paragraph | Heading | Hyperlink | Block | Asset
