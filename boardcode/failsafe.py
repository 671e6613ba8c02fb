"""Static project trees used when a document does not describe its own layout."""

from __future__ import annotations

from typing import Tuple

STM32_TEMPLATE = """\
Project_Root/
├── Core/
│   ├── Inc/
│   │   ├── main.h
│   │   └── stm32f4xx_hal_conf.h
│   └── Src/
│       ├── main.c
│       ├── stm32f4xx_hal_msp.c
│       └── stm32f4xx_it.c
├── Drivers/
│   └── STM32F4xx_HAL_Driver/
├── App/
│   └── [Generated Files...]
└── MDK-ARM/
    └── Project.uvprojx"""

ESP_IDF_TEMPLATE = """\
Project_Root/
├── main/
│   ├── CMakeLists.txt
│   └── app_main.c
├── components/
│   └── [Generated Drivers]/
├── CMakeLists.txt
└── sdkconfig"""

GENERIC_TEMPLATE = """\
Project_Root/
├── src/
│   └── main.c
├── include/
└── README.md"""

# Checked in order; the first token contained in the platform identifier wins.
PLATFORM_TEMPLATES: Tuple[Tuple[str, str], ...] = (
    ("STM32", STM32_TEMPLATE),
    ("ESP-IDF", ESP_IDF_TEMPLATE),
)


def fallback_structure(platform: str | None) -> str:
    """Return the static tree for ``platform``, matched case-insensitively by substring."""
    lowered = (platform or "").lower()
    for token, template in PLATFORM_TEMPLATES:
        if token.lower() in lowered:
            return template
    return GENERIC_TEMPLATE


__all__ = [
    "ESP_IDF_TEMPLATE",
    "GENERIC_TEMPLATE",
    "PLATFORM_TEMPLATES",
    "STM32_TEMPLATE",
    "fallback_structure",
]
