"""Hardware configuration parsing and peripheral derivation."""

from .deriver import (
    COMMON_PERIPHERALS,
    active_peripherals,
    add_common_peripherals,
    derive_from_text,
    derive_peripherals,
    toggle_peripheral,
)
from .parser import HardwareConfigError, parse_hardware_config

__all__ = [
    "COMMON_PERIPHERALS",
    "HardwareConfigError",
    "active_peripherals",
    "add_common_peripherals",
    "derive_from_text",
    "derive_peripherals",
    "parse_hardware_config",
    "toggle_peripheral",
]
