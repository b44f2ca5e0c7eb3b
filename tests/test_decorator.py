"""Tests for FunctionRenderer and the @renderer decorator."""

from dataclasses import dataclass

import pytest

from lienzo import (
    DEFAULT_PRIORITY,
    Document,
    FunctionRenderer,
    HtmlRenderer,
    Node,
    Paragraph,
    Text,
    renderer,
)
from lienzo.renderers.protocol import ContentRenderer


@dataclass(frozen=True, slots=True)
class Quote(Node):
    children: tuple[Node, ...]


class TestFunctionRenderer:
    """FunctionRenderer wraps a predicate and a render callable."""

    def test_defaults(self) -> None:
        def render_text(node: Node) -> str:
            return "t"

        r = FunctionRenderer(lambda node: isinstance(node, Text), render_text)
        assert r.priority == DEFAULT_PRIORITY
        assert r.name == "render_text"
        assert isinstance(r, ContentRenderer)

    def test_matches_coerces_to_bool(self) -> None:
        r = FunctionRenderer(lambda node: "truthy", lambda node: "")
        assert r.matches(Text("x")) is True

    def test_repr(self) -> None:
        r = FunctionRenderer(lambda node: True, lambda node: "", priority=7, name="seven")
        assert repr(r) == "FunctionRenderer('seven', priority=7)"


class TestRendererDecorator:
    """@renderer on functions and classes."""

    def test_function(self) -> None:
        @renderer(matches=lambda node: isinstance(node, Quote))
        def render_quote(node: Quote) -> str:
            return "<blockquote></blockquote>"

        assert isinstance(render_quote, FunctionRenderer)
        assert render_quote.name == "render_quote"
        html = HtmlRenderer().add_renderer(render_quote)
        assert html.render(Document(content=(Quote(children=()),))) == "<blockquote></blockquote>"

    def test_class_gets_priority_and_matches(self) -> None:
        @renderer(matches=lambda node: isinstance(node, Text), priority=10)
        class ShoutingText:
            def render(self, node: Text) -> str:
                return node.value.upper()

        instance = ShoutingText()
        assert instance.priority == 10  # type: ignore[attr-defined]
        assert instance.matches(Text("x"))  # type: ignore[attr-defined]
        assert not instance.matches(Paragraph(children=()))  # type: ignore[attr-defined]

        html = HtmlRenderer().add_renderer(instance)  # type: ignore[arg-type]
        doc = Document(content=(Paragraph(children=(Text("hi"),)),))
        assert html.render(doc) == "<p>HI</p>"

    def test_class_without_render_rejected(self) -> None:
        with pytest.raises(TypeError, match="must define render"):

            @renderer(matches=lambda node: True)
            class Empty:
                pass

    def test_class_name_honoured(self) -> None:
        @renderer(matches=lambda node: isinstance(node, Text), name="shout")
        class ShoutingText:
            def render(self, node: Text) -> str:
                return node.value.upper()

        assert ShoutingText().name == "shout"  # type: ignore[attr-defined]

    def test_class_name_defaults_to_class_name(self) -> None:
        @renderer(matches=lambda node: isinstance(node, Text))
        class ShoutingText:
            def render(self, node: Text) -> str:
                return node.value.upper()

        assert ShoutingText().name == "ShoutingText"  # type: ignore[attr-defined]

    def test_class_with_own_matches_rejected(self) -> None:
        with pytest.raises(TypeError, match="already defines matches"):

            @renderer(matches=lambda node: True)
            class Picky:
                def matches(self, node: Node) -> bool:
                    return isinstance(node, Quote)

                def render(self, node: Node) -> str:
                    return ""

    def test_class_inheriting_matches_rejected(self) -> None:
        class Base:
            def matches(self, node: Node) -> bool:
                return False

        with pytest.raises(TypeError, match="already defines matches"):

            @renderer(matches=lambda node: True)
            class Child(Base):
                def render(self, node: Node) -> str:
                    return ""

    def test_composite_extension_recurses_through_registry(self) -> None:
        html = HtmlRenderer()
        registry = html.registry

        @renderer(matches=lambda node: isinstance(node, Quote))
        def render_quote(node: Quote) -> str:
            return f"<blockquote>{registry.render_children(node.children, node)}</blockquote>"

        html.add_renderer(render_quote)
        doc = Document(content=(Quote(children=(Paragraph(children=(Text("q"),)),)),))
        assert html.render(doc) == "<blockquote><p>q</p></blockquote>"
