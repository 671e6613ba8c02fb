"""Parse hardware configuration text into a typed HardwareConfig."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ..models import (
    AttachedDevice,
    BoardIdentity,
    BusInterface,
    ChannelItem,
    Connectivity,
    GpioNet,
    HardwareConfig,
    McuInfo,
    SignalMapping,
)

CONNECTIVITY_KEY = "netlist_extract"
CHANNEL_KEYS = ("uart", "adc", "pwm")

_CHANNEL_FIELDS = ("peripheral", "timer", "channel", "mcu_pin", "net")


class HardwareConfigError(ValueError):
    """Raised when configuration text is not a JSON object."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def parse_hardware_config(text: str) -> HardwareConfig:
    """Parse configuration text; unknown fields are ignored, none are mandatory."""
    if not text or not text.strip():
        raise HardwareConfigError("Configuration is empty")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise HardwareConfigError(
            f"Invalid configuration JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    if not isinstance(data, dict):
        raise HardwareConfigError("Configuration must contain an object at the root")
    return config_from_mapping(data)


def config_from_mapping(data: Dict[str, Any]) -> HardwareConfig:
    board_data = _as_dict(data.get("board"))
    mcu_data = _as_dict(board_data.get("mcu"))
    board = BoardIdentity(
        name=_as_str(board_data.get("name")),
        vendor=_as_str(board_data.get("vendor")),
        mcu=McuInfo(
            vendor=_as_str(mcu_data.get("vendor")),
            part=_as_str(mcu_data.get("part")),
            package=_as_str(mcu_data.get("package")),
        ),
        sdk=_as_str(board_data.get("sdk")),
        language=_as_str(board_data.get("language")),
    )

    netlist = _as_dict(data.get(CONNECTIVITY_KEY))
    connectivity = Connectivity(
        interfaces=[_parse_interface(item) for item in _dicts(netlist.get("interfaces"))],
        gpio=[_parse_gpio(item) for item in _dicts(netlist.get("gpio"))],
        uart=[_parse_channel(item) for item in _dicts(netlist.get("uart"))],
        adc=[_parse_channel(item) for item in _dicts(netlist.get("adc"))],
        pwm=[_parse_channel(item) for item in _dicts(netlist.get("pwm"))],
    )
    return HardwareConfig(board=board, connectivity=connectivity, raw=data)


def _parse_interface(data: Dict[str, Any]) -> BusInterface:
    return BusInterface(
        name=_as_str(data.get("peripheral")),
        signals=[
            SignalMapping(
                signal=_as_str(item.get("signal")),
                mcu_pin=_as_str(item.get("mcu_pin")),
                net=_as_str(item.get("net")),
            )
            for item in _dicts(data.get("signals"))
        ],
        devices=[
            AttachedDevice(
                ref=_as_str(item.get("ref")),
                type=_as_str(item.get("type")),
                name=_as_str(item.get("name")),
                address=_as_str(item.get("address")),
            )
            for item in _dicts(data.get("devices"))
        ],
    )


def _parse_gpio(data: Dict[str, Any]) -> GpioNet:
    return GpioNet(
        net=_as_str(data.get("net")),
        mcu_pin=_as_str(data.get("mcu_pin")),
        direction=_as_str(data.get("direction")),
        pull=_as_str(data.get("pull")),
        active_level=_as_str(data.get("active_level")),
    )


def _parse_channel(data: Dict[str, Any]) -> ChannelItem:
    extra = {key: value for key, value in data.items() if key not in _CHANNEL_FIELDS}
    return ChannelItem(
        peripheral=_as_str(data.get("peripheral")),
        timer=_as_str(data.get("timer")),
        channel=_as_str(data.get("channel")),
        mcu_pin=_as_str(data.get("mcu_pin")),
        net=_as_str(data.get("net")),
        extra=extra,
    )


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _dicts(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _as_str(value: Any) -> Optional[str]:
    # Booleans are not identifiers; numbers are (e.g. a bare channel index).
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


__all__ = [
    "CHANNEL_KEYS",
    "CONNECTIVITY_KEY",
    "HardwareConfigError",
    "config_from_mapping",
    "parse_hardware_config",
]
