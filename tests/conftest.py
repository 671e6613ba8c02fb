from __future__ import annotations

import json

import pytest

from boardcode.hardware.examples import DEFAULT_CONFIG, get_example


@pytest.fixture
def stm32_config_text() -> str:
    """The bundled STM32 sensor hub configuration as JSON text."""
    return json.dumps(DEFAULT_CONFIG, indent=2)


@pytest.fixture
def esp32_config_text() -> str:
    example = get_example("esp32_iot")
    assert example is not None
    return example.config_text()


@pytest.fixture
def generated_document() -> str:
    """A document shaped like a typical generation service reply."""
    return (
        "# Firmware for Custom STM32 Board\n"
        "\n"
        "## Pin Map\n"
        "\n"
        "| Pin | Signal |\n"
        "| --- | --- |\n"
        "| PB6 | SCL |\n"
        "| PB7 | SDA |\n"
        "\n"
        "## Project Structure\n"
        "\n"
        "```\n"
        "Project_Root/\n"
        "├── Core/\n"
        "│   └── Src/main.c\n"
        "└── App/sensors.c\n"
        "```\n"
        "\n"
        "## Key Files\n"
        "\n"
        "Use **HAL** drivers with *blocking* calls via `HAL_I2C_Master_Transmit`.\n"
        "\n"
        "```c\n"
        "int main(void) {\n"
        "    HAL_Init(); /* **not bold** */\n"
        "}\n"
        "```\n"
    )
