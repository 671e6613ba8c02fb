"""Split a generated document into prose, code and table blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from ..models import CodeBlock, DocumentBlock, ProseBlock
from .tables import TableParser

FENCE = "```"

# A newline followed by one or more blank (or whitespace-only, CRLF included) lines.
_PARAGRAPH_BREAK = re.compile(r"\n(?:[ \t\r]*\n)+")


@dataclass
class Segment:
    """Raw piece of a document: prose text, or a fenced region split into info and body."""

    text: str
    fenced: bool = False
    info: str = ""

    @property
    def language(self) -> Optional[str]:
        tokens = self.info.split()
        return tokens[0] if tokens else None

    def source(self) -> str:
        """Return the exact document text this segment came from."""
        if not self.fenced:
            return self.text
        return f"{FENCE}{self.info}{self.text}{FENCE}"


class BlockSplitter:
    """Produces typed blocks in document order.

    Fences pair up left to right; a trailing unpaired fence stays literal
    prose. Code content never reaches the table parser.
    """

    def __init__(self, table_parser: TableParser | None = None) -> None:
        self.table_parser = table_parser or TableParser()

    def segments(self, document: str) -> List[Segment]:
        segments: List[Segment] = []
        position = 0
        while True:
            start = document.find(FENCE, position)
            if start == -1:
                break
            end = document.find(FENCE, start + len(FENCE))
            if end == -1:
                break
            if start > position:
                segments.append(Segment(text=document[position:start]))
            inner = document[start + len(FENCE):end]
            segments.append(self._fenced(inner))
            position = end + len(FENCE)
        if position < len(document):
            segments.append(Segment(text=document[position:]))
        return segments

    def split(self, document: str) -> List[DocumentBlock]:
        blocks: List[DocumentBlock] = []
        for segment in self.segments(document):
            if segment.fenced:
                blocks.append(CodeBlock(content=segment.text, language=segment.language))
                continue
            blocks.extend(self._prose_blocks(segment.text))
        return blocks

    def _prose_blocks(self, text: str) -> List[DocumentBlock]:
        blocks: List[DocumentBlock] = []
        for chunk in _PARAGRAPH_BREAK.split(text):
            trimmed = chunk.strip()
            if not trimmed:
                continue
            table = self.table_parser.parse(trimmed)
            blocks.append(table if table is not None else ProseBlock(text=trimmed))
        return blocks

    @staticmethod
    def _fenced(inner: str) -> Segment:
        newline = inner.find("\n")
        if newline == -1:
            return Segment(text=inner, fenced=True)
        return Segment(text=inner[newline + 1:], fenced=True, info=inner[: newline + 1])


_DEFAULT_SPLITTER = BlockSplitter()


def split_segments(document: str) -> List[Segment]:
    return _DEFAULT_SPLITTER.segments(document)


def split_blocks(document: str) -> List[DocumentBlock]:
    """Split ``document`` into ProseBlock, CodeBlock and TableBlock items."""
    return _DEFAULT_SPLITTER.split(document)


__all__ = ["BlockSplitter", "FENCE", "Segment", "split_blocks", "split_segments"]
