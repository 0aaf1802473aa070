"""Tests for HTML entity encoding."""

from __future__ import annotations

import pytest

from configfileform.codecs.html import HTML_ESCAPES, html_encode


class TestHtmlEncode:
    @pytest.mark.parametrize(
        ("char", "entity"),
        [("<", "&lt;"), (">", "&gt;"), ("&", "&amp;"), ('"', "&quot;"), ("'", "&apos;")],
    )
    def test_named_entities(self, char: str, entity: str) -> None:
        assert html_encode(char) == entity

    def test_mixed_text(self) -> None:
        assert html_encode("<a href='x'>Tom & Jerry</a>") == (
            "&lt;a href=&apos;x&apos;&gt;Tom &amp; Jerry&lt;/a&gt;"
        )

    def test_none_is_empty(self) -> None:
        assert html_encode(None) == ""
        assert html_encode("") == ""

    def test_plain_text_unchanged(self) -> None:
        text = "plain text, with umlauts: \u00e4\u00f6\u00fc and 100%"
        assert html_encode(text) == text

    def test_idempotent_without_special_chars(self) -> None:
        text = "no specials here"
        assert html_encode(html_encode(text)) == html_encode(text) == text

    def test_ampersand_of_entity_is_escaped_again(self) -> None:
        assert html_encode("&lt;") == "&amp;lt;"

    def test_distinct_inputs_give_distinct_outputs(self) -> None:
        samples = ["<", ">", "&", '"', "'", "&lt;", "&gt;", "&amp;", "a<b", "a&lt;b"]
        encoded = [html_encode(s) for s in samples]
        assert len(set(encoded)) == len(samples)

    def test_escape_table_is_complete(self) -> None:
        assert set(HTML_ESCAPES) == set("<>&\"'")

    def test_returns_fresh_results(self) -> None:
        first = html_encode("<x>")
        second = html_encode("&")
        assert first == "&lt;x&gt;"
        assert second == "&amp;"
