"""Heuristic extraction of a project file tree from generated text."""

from __future__ import annotations

import re
from enum import Enum
from typing import List

from ..failsafe import fallback_structure
from ..logging import get_logger
from ..models import StructureResult

_HEADING_PATTERN = re.compile(
    r"目录结构|工程结构|Project Structure|File Tree|Directory Structure|Directory Tree"
    r"|Verzeichnisstruktur|Dateistruktur|Structure du projet|Estructura del proyecto",
    re.IGNORECASE,
)
_TREE_PREFIX = re.compile(r"^[|\-+\\─-╿]")

_logger = get_logger("structure")


class LineKind(str, Enum):
    HEADING_MATCH = "heading_match"
    SECTION_BREAK = "section_break"
    BLANK = "blank"
    TREE = "tree"
    OTHER = "other"


def classify_line(line: str) -> LineKind:
    """Classify one document line for the tree scan.

    Lines opening with a tree glyph are entries even when a file name
    contains a heading phrase.
    """
    stripped = line.strip()
    if _TREE_PREFIX.match(stripped):
        return LineKind.TREE
    if _HEADING_PATTERN.search(stripped):
        return LineKind.HEADING_MATCH
    if stripped.startswith("#"):
        return LineKind.SECTION_BREAK
    if not stripped:
        return LineKind.BLANK
    if "/" in stripped:
        return LineKind.TREE
    return LineKind.OTHER


def collect_tree_lines(document: str) -> List[str]:
    """Return tree lines found under structure headings, indentation preserved."""
    collected: List[str] = []
    collecting = False
    for line in document.split("\n"):
        kind = classify_line(line)
        if kind is LineKind.HEADING_MATCH:
            collecting = True
            continue
        if not collecting:
            continue
        if kind is LineKind.SECTION_BREAK or (kind is LineKind.BLANK and collected):
            collecting = False
        elif kind is LineKind.TREE:
            collected.append(line.rstrip("\r"))
    return collected


def extract_structure(document: str | None, platform: str | None = None) -> StructureResult:
    """Extract the tree section or fall back to the platform template."""
    lines = collect_tree_lines(document) if document else []
    if lines:
        return StructureResult(
            text="\n".join(lines),
            extracted=True,
            lines=lines,
            platform=platform or "",
        )
    _logger.debug("No tree section found; using template for platform %r", platform)
    template = fallback_structure(platform)
    return StructureResult(
        text=template,
        extracted=False,
        lines=template.split("\n"),
        platform=platform or "",
    )


__all__ = ["LineKind", "classify_line", "collect_tree_lines", "extract_structure"]
