"""Pipe table detection and parsing."""

from __future__ import annotations

import re
from typing import List, Optional

from ..models import TableBlock

_SEPARATOR_PATTERN = re.compile(r"^[|:\- \t]+$")


class TableParser:
    """Turns a pipe-delimited chunk into headers and a row-major grid.

    Alignment markers in the separator row are not modelled and ragged rows
    are emitted with however many cells they split into.
    """

    def is_table(self, text: str) -> bool:
        lines = text.strip().split("\n")
        if len(lines) < 2:
            return False
        if not lines[0].strip().startswith("|"):
            return False
        separator = lines[1].strip()
        return bool(_SEPARATOR_PATTERN.match(separator)) and "-" in separator

    def parse(self, text: str) -> Optional[TableBlock]:
        if not self.is_table(text):
            return None
        lines = text.strip().split("\n")
        headers = self.split_row(lines[0])
        rows = [self.split_row(line) for line in lines[2:] if line.strip()]
        return TableBlock(headers=headers, rows=rows)

    @staticmethod
    def split_row(line: str) -> List[str]:
        stripped = line.strip()
        if stripped.startswith("|"):
            stripped = stripped[1:]
        if stripped.endswith("|"):
            stripped = stripped[:-1]
        return [cell.strip() for cell in stripped.split("|")]


_DEFAULT_PARSER = TableParser()


def parse_table(text: str) -> Optional[TableBlock]:
    """Return a TableBlock, or None when ``text`` is not a pipe table."""
    return _DEFAULT_PARSER.parse(text)


__all__ = ["TableParser", "parse_table"]
