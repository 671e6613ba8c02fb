"""Bundled board configurations used as starting points."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

DEFAULT_CONFIG: Dict[str, Any] = {
    "board": {
        "name": "Custom STM32 Board",
        "vendor": "Generic",
        "mcu": {
            "vendor": "ST",
            "part": "STM32F407VGT6",
            "package": "LQFP100",
            "clock": {"hse_hz": 8000000},
            "debug": {"swd": True, "uart": "UART1"},
        },
        "sdk": "STM32Cube",
        "language": "C",
    },
    "netlist_extract": {
        "interfaces": [
            {
                "peripheral": "I2C1",
                "signals": [
                    {"mcu_pin": "PB6", "signal": "SCL", "net": "I2C1_SCL"},
                    {"mcu_pin": "PB7", "signal": "SDA", "net": "I2C1_SDA"},
                ],
                "devices": [
                    {"ref": "U3", "type": "sensor", "name": "MPU6050", "address": "0x68"},
                    {"ref": "U4", "type": "display", "name": "SSD1306", "address": "0x3C"},
                ],
            }
        ],
        "gpio": [
            {"net": "LED1", "mcu_pin": "PC13", "direction": "out", "active_level": "low"},
            {"net": "KEY1", "mcu_pin": "PA0", "direction": "in", "pull": "up"},
        ],
        "uart": [
            {"peripheral": "USART1", "tx": "PA9", "rx": "PA10", "baud": 115200, "usage": "log"}
        ],
    },
}

DEFAULT_FEATURES = (
    "Initialize all selected peripherals.\n"
    "Sample the sensor every 100ms and print the data over the serial port.\n"
    "Provide a simple CLI command to switch the LED on and off."
)


@dataclass(frozen=True)
class BoardExample:
    """A ready-made configuration plus the feature request that goes with it."""

    id: str
    title: str
    description: str
    config: Dict[str, Any]
    features: str

    def config_text(self) -> str:
        return json.dumps(self.config, indent=2, ensure_ascii=False)


EXAMPLES: tuple[BoardExample, ...] = (
    BoardExample(
        id="stm32_sensor",
        title="STM32 I2C Sensor Hub",
        description="STM32F4 + MPU6050 + SSD1306 OLED using HAL.",
        config=DEFAULT_CONFIG,
        features=(
            "Initialize I2C1.\n"
            "Read MPU6050 Accel/Gyro data every 50ms.\n"
            "Update OLED with X/Y/Z values.\n"
            "Blink status LED on data ready."
        ),
    ),
    BoardExample(
        id="esp32_iot",
        title="ESP32 IoT Data Logger",
        description="ESP32-WROOM with WiFi and Deep Sleep.",
        config={
            "board": {
                "name": "ESP32 DevKit",
                "vendor": "Espressif",
                "mcu": {
                    "vendor": "Espressif",
                    "part": "ESP32-WROOM-32",
                    "clock": {"cpu_hz": 240000000},
                    "debug": {"uart": "UART0"},
                },
                "sdk": "ESP-IDF",
                "language": "C",
            },
            "netlist_extract": {
                "interfaces": [
                    {
                        "peripheral": "SPI2",
                        "signals": [
                            {"mcu_pin": "IO23", "signal": "MOSI"},
                            {"mcu_pin": "IO19", "signal": "MISO"},
                            {"mcu_pin": "IO18", "signal": "CLK"},
                            {"mcu_pin": "IO5", "signal": "CS"},
                        ],
                        "devices": [{"ref": "U2", "type": "storage", "name": "SD_Card"}],
                    }
                ],
                "gpio": [{"net": "WIFI_LED", "mcu_pin": "IO2", "direction": "out"}],
            },
        },
        features=(
            "Connect to WiFi (SSID/PASS via menuconfig).\n"
            "Sync SNTP time.\n"
            "Log temperature (simulated) to SD Card every 1min.\n"
            "Enter Light Sleep between logs."
        ),
    ),
    BoardExample(
        id="arduino_robot",
        title="Arduino Robot Controller",
        description="Arduino Uno with Servo and Motor Driver.",
        config={
            "board": {
                "name": "Arduino Uno",
                "vendor": "Arduino",
                "mcu": {"vendor": "Microchip", "part": "ATmega328P"},
                "sdk": "Arduino",
                "language": "C++",
            },
            "netlist_extract": {
                "pwm": [{"timer": "T1", "channel": "A", "mcu_pin": "D9", "net": "SERVO_ARM"}],
                "gpio": [{"net": "BTN_START", "mcu_pin": "D2", "direction": "in", "pull": "up"}],
            },
        },
        features="Servo sweep on button press.\nSerial debug output.\nDebounce button input.",
    ),
)


def default_config_text() -> str:
    return json.dumps(DEFAULT_CONFIG, indent=2, ensure_ascii=False)


def get_example(example_id: str) -> Optional[BoardExample]:
    for example in EXAMPLES:
        if example.id == example_id:
            return example
    return None


def list_examples() -> List[Dict[str, str]]:
    return [
        {"id": ex.id, "title": ex.title, "description": ex.description}
        for ex in EXAMPLES
    ]


__all__ = [
    "BoardExample",
    "DEFAULT_CONFIG",
    "DEFAULT_FEATURES",
    "EXAMPLES",
    "default_config_text",
    "get_example",
    "list_examples",
]
