"""HTML rendering of document blocks."""

from __future__ import annotations

import html
import re
from typing import Iterable, List

from ..models import CodeBlock, DocumentBlock, ProseBlock, TableBlock
from .inline import render_inline_html
from .splitter import split_blocks

_HEADING = re.compile(r"^(#{1,3}) (.*)$")
_BULLET = re.compile(r"^\s*[-*]\s+(.*)$")
_NUMBERED = re.compile(r"^\s*(\d+)\.\s+(.*)$")


class DocumentRenderer:
    """Renders blocks to HTML; code content is escaped but never inline-rendered."""

    def render(self, blocks: Iterable[DocumentBlock]) -> str:
        parts: List[str] = []
        for block in blocks:
            if isinstance(block, CodeBlock):
                parts.append(self.render_code(block))
            elif isinstance(block, TableBlock):
                parts.append(self.render_table(block))
            elif isinstance(block, ProseBlock):
                parts.append(self.render_prose(block))
        return "\n".join(parts)

    def render_prose(self, block: ProseBlock) -> str:
        rendered = [self._render_line(line) for line in block.text.split("\n")]
        return f'<div class="prose">{"<br/>".join(rendered)}</div>'

    def render_table(self, block: TableBlock) -> str:
        head = "".join(f"<th>{render_inline_html(cell)}</th>" for cell in block.headers)
        body_rows = []
        for row in block.rows:
            cells = "".join(f"<td>{render_inline_html(cell)}</td>" for cell in row)
            body_rows.append(f"<tr>{cells}</tr>")
        return (
            "<table>"
            f"<thead><tr>{head}</tr></thead>"
            f"<tbody>{''.join(body_rows)}</tbody>"
            "</table>"
        )

    def render_code(self, block: CodeBlock) -> str:
        label = html.escape((block.language or "code").upper())
        content = html.escape(block.content, quote=False)
        return (
            '<div class="code-block">'
            f'<div class="code-label">{label}</div>'
            f"<pre><code>{content}</code></pre>"
            "</div>"
        )

    @staticmethod
    def _render_line(line: str) -> str:
        heading = _HEADING.match(line)
        if heading:
            level = len(heading.group(1))
            return f"<h{level}>{render_inline_html(heading.group(2))}</h{level}>"
        numbered = _NUMBERED.match(line)
        if numbered:
            number, content = numbered.groups()
            return f'<div class="numbered"><span>{number}.</span> {render_inline_html(content)}</div>'
        bullet = _BULLET.match(line)
        if bullet:
            return f'<div class="bullet"><span>•</span> {render_inline_html(bullet.group(1))}</div>'
        return f"<span>{render_inline_html(line)}</span>"


def render_document(document: str) -> str:
    """Split ``document`` and render every block to HTML."""
    return DocumentRenderer().render(split_blocks(document))


__all__ = ["DocumentRenderer", "render_document"]
