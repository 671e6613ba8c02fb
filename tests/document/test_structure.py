"""Tests for project tree extraction."""

from __future__ import annotations

from boardcode.document.structure import (
    LineKind,
    classify_line,
    collect_tree_lines,
    extract_structure,
)
from boardcode.failsafe import ESP_IDF_TEMPLATE, GENERIC_TEMPLATE, STM32_TEMPLATE


def test_classify_line_categories() -> None:
    assert classify_line("## Project Structure") is LineKind.HEADING_MATCH
    assert classify_line("### 目录结构") is LineKind.HEADING_MATCH
    assert classify_line("**file tree**") is LineKind.HEADING_MATCH
    assert classify_line("## Build") is LineKind.SECTION_BREAK
    assert classify_line("   ") is LineKind.BLANK
    assert classify_line("├── main.c") is LineKind.TREE
    assert classify_line("    └── util.c") is LineKind.TREE
    assert classify_line("| app.c") is LineKind.TREE
    assert classify_line("see src/main.c") is LineKind.TREE
    assert classify_line("main.c") is LineKind.OTHER


def test_extract_collects_lines_until_blank() -> None:
    document = (
        "# Output\n"
        "## Project Structure\n"
        "\n"
        "src/main.c\n"
        "src/drivers/i2c.c\n"
        "include/board.h\n"
        "\n"
        "Unrelated prose mentioning docs/guide.md afterwards.\n"
    )

    result = extract_structure(document, "STM32Cube")

    assert result.extracted is True
    assert result.used_fallback is False
    assert result.lines == ["src/main.c", "src/drivers/i2c.c", "include/board.h"]
    assert result.text == "src/main.c\nsrc/drivers/i2c.c\ninclude/board.h"


def test_extract_preserves_indentation_inside_fences(generated_document: str) -> None:
    result = extract_structure(generated_document, "STM32Cube")

    assert result.extracted is True
    assert result.lines == [
        "Project_Root/",
        "├── Core/",
        "│   └── Src/main.c",
        "└── App/sensors.c",
    ]


def test_extract_stops_at_next_heading() -> None:
    lines = collect_tree_lines("## File Tree\na/b\n## Next\nc/d\n")

    assert lines == ["a/b"]


def test_tree_entry_named_like_a_heading_is_kept() -> None:
    document = "## Project Structure\nProject_Root/\n├── docs/Project Structure.md\n└── src/main.c\n"

    assert classify_line("├── docs/Project Structure.md") is LineKind.TREE
    assert collect_tree_lines(document) == [
        "Project_Root/",
        "├── docs/Project Structure.md",
        "└── src/main.c",
    ]


def test_fallback_is_selected_by_platform_token() -> None:
    no_tree = "# Output\n\nNothing that looks like a listing."

    stm32 = extract_structure(no_tree, "STM32Cube")
    esp = extract_structure(no_tree, "ESP-IDF v5")
    other = extract_structure(no_tree, "Arduino")
    unknown = extract_structure(None, None)

    assert stm32.extracted is False
    assert stm32.text == STM32_TEMPLATE
    assert esp.text == ESP_IDF_TEMPLATE
    assert other.text == GENERIC_TEMPLATE
    assert unknown.text == GENERIC_TEMPLATE


def test_fallback_is_deterministic() -> None:
    first = extract_structure("## Notes\nnone", "STM32Cube")
    second = extract_structure("## Notes\nnone", "STM32Cube")

    assert first == second
    assert first.text == STM32_TEMPLATE


def test_heading_without_tree_lines_falls_back() -> None:
    result = extract_structure("## Project Structure\nTBD\n\n", "ESP-IDF")

    assert result.extracted is False
    assert result.text == ESP_IDF_TEMPLATE
