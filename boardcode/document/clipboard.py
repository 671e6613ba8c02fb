"""Clipboard helper for code blocks."""

from __future__ import annotations

import pyperclip

from ..logging import get_logger
from ..models import CodeBlock

_logger = get_logger("clipboard")


def copy_code_block(block: CodeBlock) -> bool:
    """Copy the raw block content; returns False when no clipboard is available."""
    try:
        pyperclip.copy(block.content)
    except pyperclip.PyperclipException as exc:
        _logger.warning("Unable to copy code block to clipboard: %s", exc)
        return False
    _logger.debug("Copied %d characters to clipboard", len(block.content))
    return True


__all__ = ["copy_code_block"]
