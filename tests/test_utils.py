"""Tests for utility modules: escaping, logging and StringBuilder."""

import logging

import pytest

from lienzo import Document, HtmlRenderer, Node
from lienzo.stringbuilder import StringBuilder
from lienzo.utils import escape_html, get_logger


class TestEscapeHtml:
    """escape_html covers text and double-quoted attribute positions."""

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("plain", "plain"),
            ("a < b > c", "a &lt; b &gt; c"),
            ("Fish & Chips", "Fish &amp; Chips"),
            ('say "hi"', "say &quot;hi&quot;"),
            ("it's", "it's"),
            ("&amp;", "&amp;amp;"),
        ],
    )
    def test_escape(self, raw: str, escaped: str) -> None:
        assert escape_html(raw) == escaped


class TestGetLogger:
    """get_logger namespaces under lienzo."""

    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "lienzo.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("lienzo.renderers").name == "lienzo.renderers"
        assert get_logger("lienzo").name == "lienzo"

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lienzo.renderers.registry"):
            HtmlRenderer()
        records = [r for r in caplog.records if r.name == "lienzo.renderers.registry"]
        assert any("Registered TextRenderer" in r.getMessage() for r in records)

    def test_fallback_drop_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        class Widget(Node):
            pass

        with caplog.at_level(logging.DEBUG, logger="lienzo"):
            assert HtmlRenderer().render(Document(content=(Widget(),))) == ""
        assert "Widget" in caplog.text


class TestStringBuilder:
    """StringBuilder accumulates fragments in order."""

    def test_append_chain(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("x").append("</p>")
        assert sb.build() == "<p>x</p>"

    def test_empty_fragments_skipped(self) -> None:
        sb = StringBuilder().append("").extend(["a", "", "b"])
        assert len(sb) == 2
        assert sb.build() == "ab"

    def test_bool(self) -> None:
        assert not StringBuilder()
        assert StringBuilder().append("x")
