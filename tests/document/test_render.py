"""Tests for HTML rendering and the clipboard helper."""

from __future__ import annotations

import pyperclip

from boardcode.document.clipboard import copy_code_block
from boardcode.document.render import DocumentRenderer, render_document
from boardcode.models import CodeBlock, ProseBlock


def test_render_prose_headings_and_lists() -> None:
    html = DocumentRenderer().render_prose(
        ProseBlock(text="# Title\n- item **one**\n2. step\nplain *text*")
    )

    assert "<h1>Title</h1>" in html
    assert '<div class="bullet"><span>•</span> item <strong>one</strong></div>' in html
    assert '<div class="numbered"><span>2.</span> step</div>' in html
    assert "<span>plain <em>text</em></span>" in html
    assert html.count("<br/>") == 3


def test_render_document_never_inline_renders_code(generated_document: str) -> None:
    html = render_document(generated_document)

    assert "/* **not bold** */" in html
    assert '<div class="code-label">C</div>' in html
    assert '<div class="code-label">CODE</div>' in html
    assert "<td>PB6</td>" in html
    assert "<th>Pin</th>" in html
    assert "<code>HAL_I2C_Master_Transmit</code>" in html


def test_render_code_escapes_markup() -> None:
    html = DocumentRenderer().render_code(CodeBlock(content="if (a < b) {}\n", language="cpp"))

    assert "<pre><code>if (a &lt; b) {}\n</code></pre>" in html
    assert "CPP" in html


def test_copy_code_block_copies_raw_content(monkeypatch) -> None:
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert copy_code_block(CodeBlock(content="x = **1**\n", language="py")) is True
    assert copied == ["x = **1**\n"]


def test_copy_code_block_reports_missing_clipboard(monkeypatch) -> None:
    def _fail(_: str) -> None:
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, "copy", _fail)

    assert copy_code_block(CodeBlock(content="x")) is False
