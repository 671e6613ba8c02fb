"""Tests for block splitting."""

from __future__ import annotations

from boardcode.document.splitter import split_blocks, split_segments
from boardcode.models import CodeBlock, ProseBlock, TableBlock


def test_split_interleaves_prose_code_and_tables() -> None:
    document = (
        "Intro line\n\n"
        "```c\nint x;\n```\n"
        "After\n\n\n"
        "| Pin | Signal |\n| --- | --- |\n| PB6 | SCL |\n"
    )

    blocks = split_blocks(document)

    assert blocks == [
        ProseBlock(text="Intro line"),
        CodeBlock(content="int x;\n", language="c"),
        ProseBlock(text="After"),
        TableBlock(headers=["Pin", "Signal"], rows=[["PB6", "SCL"]]),
    ]


def test_split_yields_one_code_block_per_fence_pair(generated_document: str) -> None:
    blocks = split_blocks(generated_document)
    code_blocks = [block for block in blocks if isinstance(block, CodeBlock)]

    assert len(code_blocks) == 2
    assert code_blocks[0].language is None
    assert code_blocks[0].content.startswith("Project_Root/\n")
    assert code_blocks[1].language == "c"
    assert "/* **not bold** */" in code_blocks[1].content


def test_fence_round_trip_reproduces_document(generated_document: str) -> None:
    segments = split_segments(generated_document)

    assert "".join(segment.source() for segment in segments) == generated_document
    assert sum(1 for segment in segments if segment.fenced) == 2


def test_unpaired_fence_is_literal_text() -> None:
    document = "a\n\n```py\nprint(1)\n```\nb\n```\nc"

    blocks = split_blocks(document)

    assert blocks == [
        ProseBlock(text="a"),
        CodeBlock(content="print(1)\n", language="py"),
        ProseBlock(text="b\n```\nc"),
    ]


def test_table_inside_fence_stays_code() -> None:
    document = "```\n| a | b |\n| - | - |\n```"

    (block,) = split_blocks(document)

    assert isinstance(block, CodeBlock)
    assert block.language is None
    assert block.content == "| a | b |\n| - | - |\n"


def test_single_line_fence_has_no_language() -> None:
    (block,) = split_blocks("```inline```")

    assert block == CodeBlock(content="inline", language=None)


def test_whitespace_only_lines_separate_paragraphs() -> None:
    blocks = split_blocks("first\n   \nsecond\nstill second\n\n\n\nthird")

    assert [block.text for block in blocks] == ["first", "second\nstill second", "third"]


def test_crlf_document_splits_prose_and_table() -> None:
    document = "Pin map:\r\n\r\n| Pin | Signal |\r\n| --- | --- |\r\n| PB6 | SCL |\r\n\r\nDone."

    blocks = split_blocks(document)

    assert blocks == [
        ProseBlock(text="Pin map:"),
        TableBlock(headers=["Pin", "Signal"], rows=[["PB6", "SCL"]]),
        ProseBlock(text="Done."),
    ]
    assert "".join(segment.source() for segment in split_segments(document)) == document


def test_empty_document_has_no_blocks() -> None:
    assert split_blocks("") == []
    assert split_blocks("\n\n  \n") == []
