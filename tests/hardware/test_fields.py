"""Tests for configuration field helpers and bundled examples."""

from __future__ import annotations

import json

from boardcode.hardware.examples import EXAMPLES, get_example, list_examples
from boardcode.hardware.fields import get_field, update_field


def test_get_field_reads_nested_values(stm32_config_text: str) -> None:
    assert get_field(stm32_config_text, ["board", "sdk"]) == "STM32Cube"
    assert get_field(stm32_config_text, ["board", "missing"]) == ""
    assert get_field(stm32_config_text, ["board", "sdk", "deeper"]) == ""
    assert get_field("{not json", ["board"]) == ""


def test_update_field_creates_intermediate_mappings() -> None:
    updated = update_field("{}", ["board", "mcu", "part"], "STM32G431")

    assert json.loads(updated) == {"board": {"mcu": {"part": "STM32G431"}}}
    assert updated.startswith("{\n  ")


def test_update_field_leaves_unparsable_text_alone() -> None:
    assert update_field("{oops", ["board", "sdk"], "ESP-IDF") == "{oops"
    assert update_field("[]", ["board"], "x") == "[]"


def test_examples_are_listed_and_parse() -> None:
    listed = list_examples()

    assert [entry["id"] for entry in listed] == ["stm32_sensor", "esp32_iot", "arduino_robot"]
    for example in EXAMPLES:
        assert json.loads(example.config_text())["board"]["sdk"]
    assert get_example("missing") is None
