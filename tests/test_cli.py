"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from boardcode.cli import _build_parser, main
from boardcode.failsafe import GENERIC_TEMPLATE


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "render", "doc.md"])
    assert args.verbose is True
    assert args.command == "render"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["peripherals", "board.json", "--verbose"])
    assert args.verbose is True
    assert args.command == "peripherals"


def test_cli_peripherals_lists_items(tmp_path: Path, stm32_config_text: str, capsys) -> None:
    config = tmp_path / "board.json"
    config.write_text(stm32_config_text, encoding="utf-8")

    main(["peripherals", str(config), "--common"])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[x] I2C1 <BUS>"
    assert "[x] KEY1 <GPIO>" in out
    assert out[-1] == "[x] DMA Controller <Sys> (pinned)"


def test_cli_peripherals_json(tmp_path: Path, stm32_config_text: str, capsys) -> None:
    config = tmp_path / "board.json"
    config.write_text(stm32_config_text, encoding="utf-8")

    main(["peripherals", str(config), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data[0] == {"identity": "I2C1", "display_type": "BUS", "selected": True, "pinned": False}


def test_cli_peripherals_rejects_bad_config(tmp_path: Path) -> None:
    config = tmp_path / "board.json"
    config.write_text("{", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["peripherals", str(config)])

    assert excinfo.value.code == 1


def test_cli_render_summarises_blocks(tmp_path: Path, generated_document: str, capsys) -> None:
    document = tmp_path / "out.md"
    document.write_text(generated_document, encoding="utf-8")

    main(["render", str(document)])

    out = capsys.readouterr().out
    assert "table (2 columns, 2 rows)" in out
    assert "code (c, 3 lines)" in out


def test_cli_structure_uses_platform_fallback(tmp_path: Path, capsys) -> None:
    document = tmp_path / "out.md"
    document.write_text("# Nothing\n", encoding="utf-8")

    main(["structure", str(document), "--platform", "Arduino"])

    out = capsys.readouterr().out
    assert out.startswith(GENERIC_TEMPLATE)
    assert "inferred from SDK defaults" in out


def test_cli_copy_code_reports_missing_block(tmp_path: Path) -> None:
    document = tmp_path / "out.md"
    document.write_text("no code here", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["copy-code", str(document)])

    assert excinfo.value.code == 1
