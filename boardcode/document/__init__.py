"""Document segmentation, rendering and project-tree extraction."""

from .inline import InlineSpan, inline_to_html, render_inline
from .render import DocumentRenderer, render_document
from .splitter import BlockSplitter, split_blocks, split_segments
from .structure import LineKind, classify_line, extract_structure
from .tables import TableParser, parse_table

__all__ = [
    "BlockSplitter",
    "DocumentRenderer",
    "InlineSpan",
    "LineKind",
    "TableParser",
    "classify_line",
    "extract_structure",
    "inline_to_html",
    "parse_table",
    "render_document",
    "render_inline",
    "split_blocks",
    "split_segments",
]
