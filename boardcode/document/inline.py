"""Inline emphasis and code span rendering for prose and table cells."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Iterable, List

TEXT = "text"
BOLD = "bold"
ITALIC = "italic"
CODE = "code"

# Applied in this order; each rule only sees plain text left by earlier rules.
_RULES = (
    (BOLD, re.compile(r"\*\*(.+?)\*\*")),
    (ITALIC, re.compile(r"\*(.+?)\*")),
    (CODE, re.compile(r"`(.+?)`")),
)

_TAGS = {BOLD: "strong", ITALIC: "em", CODE: "code"}


@dataclass
class InlineSpan:
    kind: str
    text: str


def render_inline(text: str) -> List[InlineSpan]:
    """Resolve bold, then italic, then inline code into annotated spans.

    Delimiters consumed by one rule are never reconsidered by a later rule and
    span contents are not processed further.
    """
    spans = [InlineSpan(TEXT, text)] if text else []
    for kind, pattern in _RULES:
        spans = _apply_rule(spans, kind, pattern)
    return spans


def _apply_rule(spans: Iterable[InlineSpan], kind: str, pattern: re.Pattern[str]) -> List[InlineSpan]:
    result: List[InlineSpan] = []
    for span in spans:
        if span.kind != TEXT:
            result.append(span)
            continue
        position = 0
        for match in pattern.finditer(span.text):
            if match.start() > position:
                result.append(InlineSpan(TEXT, span.text[position:match.start()]))
            result.append(InlineSpan(kind, match.group(1)))
            position = match.end()
        if position < len(span.text):
            result.append(InlineSpan(TEXT, span.text[position:]))
    return result


def inline_to_html(spans: Iterable[InlineSpan]) -> str:
    parts: List[str] = []
    for span in spans:
        escaped = html.escape(span.text, quote=False)
        tag = _TAGS.get(span.kind)
        parts.append(f"<{tag}>{escaped}</{tag}>" if tag else escaped)
    return "".join(parts)


def render_inline_html(text: str) -> str:
    return inline_to_html(render_inline(text))


__all__ = [
    "BOLD",
    "CODE",
    "ITALIC",
    "InlineSpan",
    "TEXT",
    "inline_to_html",
    "render_inline",
    "render_inline_html",
]
