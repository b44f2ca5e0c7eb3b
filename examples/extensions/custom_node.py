"""Teach the renderer a new node type in ~10 lines with @renderer."""

from dataclasses import dataclass

from lienzo import Document, HtmlRenderer, Node, Paragraph, Text, renderer


@dataclass(frozen=True, slots=True)
class Callout(Node):
    children: tuple[Node, ...]


html = HtmlRenderer()


@renderer(matches=lambda node: isinstance(node, Callout))
def render_callout(node: Callout) -> str:
    """Render a Callout as a styled aside, children via the registry."""
    inner = html.registry.render_children(node.children, node)
    return f'<aside class="callout">{inner}</aside>'


html.add_renderer(render_callout)

doc = Document(content=(Callout(children=(Paragraph(children=(Text("Heads up!"),)),)),))
print(html.render(doc))
