"""Error-path and malformed input tests.

Malformed nodes are rejected with MalformedNodeError; unknown content is
skipped. A failure anywhere aborts the whole document render.
"""

import pytest

from lienzo import (
    Asset,
    Block,
    Document,
    Heading,
    HtmlRenderer,
    Hyperlink,
    LienzoError,
    MalformedNodeError,
    NestingDepthError,
    Paragraph,
    RenderConfig,
    RendererResolutionError,
    RenderError,
    SerializationError,
    Text,
)

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestErrorFormatting:
    """Verify error messages and hierarchy."""

    def test_malformed_node_message(self) -> None:
        err = MalformedNodeError("Heading", "level must be 1-6, got 9")
        assert str(err) == "Malformed Heading: level must be 1-6, got 9"
        assert err.node_type == "Heading"

    def test_nesting_depth_message(self) -> None:
        err = NestingDepthError(130, 128)
        assert "130" in str(err)
        assert "max_depth=128" in str(err)
        assert (err.depth, err.limit) == (130, 128)

    def test_resolution_error_names_node(self) -> None:
        err = RendererResolutionError("Divider")
        assert "Divider" in str(err)
        assert err.node_type == "Divider"

    def test_hierarchy(self) -> None:
        assert issubclass(MalformedNodeError, RenderError)
        assert issubclass(NestingDepthError, RenderError)
        assert issubclass(RenderError, LienzoError)
        assert issubclass(RendererResolutionError, LienzoError)
        assert not issubclass(RendererResolutionError, RenderError)
        assert issubclass(SerializationError, ValueError)


# =========================================================================
# Malformed nodes
# =========================================================================


def _render(*nodes) -> str:  # type: ignore[no-untyped-def]
    return HtmlRenderer().render(Document(content=tuple(nodes)))


class TestMalformedNodes:
    """Contract violations are rejected, not coerced."""

    @pytest.mark.parametrize("level", [0, 7, -1, "2", 2.0, True])
    def test_heading_level_out_of_range(self, level: object) -> None:
        with pytest.raises(MalformedNodeError, match="level must be 1-6"):
            _render(Heading(level=level, children=(Text("x"),)))  # type: ignore[arg-type]

    def test_paragraph_without_children(self) -> None:
        with pytest.raises(MalformedNodeError, match="Malformed Paragraph"):
            _render(Paragraph(children=None))  # type: ignore[arg-type]

    def test_heading_without_children(self) -> None:
        with pytest.raises(MalformedNodeError, match="Malformed Heading"):
            _render(Heading(level=1, children=None))  # type: ignore[arg-type]

    def test_hyperlink_without_children(self) -> None:
        with pytest.raises(MalformedNodeError, match="Malformed Hyperlink"):
            _render(Hyperlink(url="/", title="", children=None))  # type: ignore[arg-type]

    def test_document_without_content(self) -> None:
        with pytest.raises(MalformedNodeError, match="Malformed Document"):
            HtmlRenderer().render(Document(content=None))  # type: ignore[arg-type]

    def test_asset_without_file(self) -> None:
        with pytest.raises(MalformedNodeError, match="has no file"):
            _render(Block(target=Asset(title="Orphan", file=None)))

    def test_failure_aborts_whole_document(self) -> None:
        doc = Document(
            content=(
                Paragraph(children=(Text("fine"),)),
                Heading(level=9, children=()),  # type: ignore[arg-type]
            )
        )
        with pytest.raises(MalformedNodeError):
            HtmlRenderer().render(doc)


# =========================================================================
# Nesting depth
# =========================================================================


def _nested_links(depth: int) -> Hyperlink:
    node: Text | Hyperlink = Text("x")
    for _ in range(depth):
        node = Hyperlink(url="/", title="", children=(node,))
    return node  # type: ignore[return-value]


class TestNestingDepth:
    """Deep trees hit max_depth before the interpreter stack."""

    def test_depth_at_limit_renders(self) -> None:
        # Paragraph > Hyperlink > Text is depth 3
        doc = Document(content=(Paragraph(children=(_nested_links(1),)),))
        assert HtmlRenderer(config=RenderConfig(max_depth=3)).render(doc) == (
            '<p><a href="/" title="">x</a></p>'
        )

    def test_depth_over_limit_raises(self) -> None:
        doc = Document(content=(Paragraph(children=(_nested_links(2),)),))
        with pytest.raises(NestingDepthError) as exc_info:
            HtmlRenderer(config=RenderConfig(max_depth=3)).render(doc)
        assert exc_info.value.depth == 4

    def test_default_limit_guards_pathological_input(self) -> None:
        doc = Document(content=(_nested_links(500),))
        with pytest.raises(NestingDepthError):
            HtmlRenderer().render(doc)

    def test_depth_resets_between_renders(self) -> None:
        renderer = HtmlRenderer(config=RenderConfig(max_depth=3))
        ok = Document(content=(Paragraph(children=(_nested_links(1),)),))
        too_deep = Document(content=(_nested_links(5),))
        with pytest.raises(NestingDepthError):
            renderer.render(too_deep)
        assert renderer.render(ok).startswith("<p>")
