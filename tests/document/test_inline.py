"""Tests for inline span rendering."""

from __future__ import annotations

from boardcode.document.inline import (
    BOLD,
    CODE,
    ITALIC,
    TEXT,
    InlineSpan,
    render_inline,
    render_inline_html,
)


def test_render_inline_resolves_each_rule_once() -> None:
    spans = render_inline("**X** and *Y* and `Z`")

    assert spans == [
        InlineSpan(BOLD, "X"),
        InlineSpan(TEXT, " and "),
        InlineSpan(ITALIC, "Y"),
        InlineSpan(TEXT, " and "),
        InlineSpan(CODE, "Z"),
    ]


def test_bold_content_is_not_reprocessed_by_italic_rule() -> None:
    assert render_inline("**a*b**") == [InlineSpan(BOLD, "a*b")]


def test_single_star_inside_code_is_left_alone() -> None:
    assert render_inline("call `a*b` now") == [
        InlineSpan(TEXT, "call "),
        InlineSpan(CODE, "a*b"),
        InlineSpan(TEXT, " now"),
    ]


def test_unclosed_delimiters_stay_text() -> None:
    assert render_inline("2 * 3 and `tick") == [InlineSpan(TEXT, "2 * 3 and `tick")]
    assert render_inline("a ** b") == [InlineSpan(TEXT, "a ** b")]
    assert render_inline("**unclosed") == [InlineSpan(TEXT, "**unclosed")]
    assert render_inline("empty `` ticks") == [InlineSpan(TEXT, "empty `` ticks")]
    assert render_inline("") == []


def test_render_inline_html_escapes_content() -> None:
    html = render_inline_html("<b> **x** & `a<b`")

    assert html == "&lt;b&gt; <strong>x</strong> &amp; <code>a&lt;b</code>"
