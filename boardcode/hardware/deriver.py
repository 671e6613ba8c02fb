"""Derive the canonical peripheral list from a hardware configuration."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Set

from ..config import CommonPeripheral
from ..logging import get_logger
from ..models import ChannelItem, DerivationOutcome, HardwareConfig, PeripheralItem
from .parser import CHANNEL_KEYS, HardwareConfigError, parse_hardware_config

UNKNOWN_IDENTITY = "Unknown"

COMMON_PERIPHERALS: tuple[CommonPeripheral, ...] = (
    CommonPeripheral(name="System Tick", type="Sys"),
    CommonPeripheral(name="Watchdog", type="Sys"),
    CommonPeripheral(name="USB CDC", type="Comm"),
    CommonPeripheral(name="RTC", type="Time"),
    CommonPeripheral(name="DMA Controller", type="Sys"),
)

_logger = get_logger("deriver")


def derive_peripherals(
    config: HardwareConfig,
    previous: Sequence[PeripheralItem] = (),
) -> List[PeripheralItem]:
    """Return detected items followed by the pinned items of ``previous``.

    Detected items are unique by identity (first seen wins) and any detected
    item sharing an identity with a pinned item is dropped. ``selected`` is
    carried over by identity from ``previous``; new identities start selected.
    """
    pinned = [item for item in previous if item.pinned]
    pinned_ids = {item.identity for item in pinned}
    selection = {item.identity: item.selected for item in previous}

    detected: List[PeripheralItem] = []
    for identity, display_type in _detect(config):
        if identity in pinned_ids:
            continue
        detected.append(
            PeripheralItem(
                identity=identity,
                display_type=display_type,
                selected=selection.get(identity, True),
            )
        )
    return detected + [replace(item) for item in pinned]


def derive_from_text(
    text: str,
    previous: Sequence[PeripheralItem] = (),
) -> DerivationOutcome:
    """Parse ``text`` and derive; keep ``previous`` unchanged when parsing fails."""
    try:
        config = parse_hardware_config(text)
    except HardwareConfigError as exc:
        _logger.debug("Keeping last known peripherals: %s", exc)
        return DerivationOutcome(value=list(previous), used_fallback=True, error=str(exc))
    return DerivationOutcome(value=derive_peripherals(config, previous))


def add_common_peripherals(
    items: Sequence[PeripheralItem],
    catalog: Iterable[CommonPeripheral] = COMMON_PERIPHERALS,
) -> List[PeripheralItem]:
    """Append pinned catalog entries whose names are not listed yet."""
    result = list(items)
    present: Set[str] = {item.identity for item in result}
    for entry in catalog:
        if entry.name in present:
            continue
        present.add(entry.name)
        result.append(
            PeripheralItem(identity=entry.name, display_type=entry.type, selected=True, pinned=True)
        )
    return result


def toggle_peripheral(items: Sequence[PeripheralItem], identity: str) -> List[PeripheralItem]:
    return [
        replace(item, selected=not item.selected) if item.identity == identity else item
        for item in items
    ]


def active_peripherals(items: Iterable[PeripheralItem]) -> List[str]:
    return [item.identity for item in items if item.selected]


def _detect(config: HardwareConfig) -> List[tuple[str, str]]:
    found: Dict[str, str] = {}
    connectivity = config.connectivity

    def _add(identity: Optional[str], display_type: str) -> None:
        if identity and identity not in found:
            found[identity] = display_type

    for interface in connectivity.interfaces:
        _add(interface.name, "BUS")
    for key in CHANNEL_KEYS:
        for item in getattr(connectivity, key):
            _add(_channel_identity(item), key.upper())
    for net in connectivity.gpio:
        _add(net.net, "GPIO")
    # dicts keep insertion order, which is the walk order above
    return list(found.items())


def _channel_identity(item: ChannelItem) -> str:
    return item.peripheral or item.timer or item.channel or UNKNOWN_IDENTITY


__all__ = [
    "COMMON_PERIPHERALS",
    "UNKNOWN_IDENTITY",
    "active_peripherals",
    "add_common_peripherals",
    "derive_from_text",
    "derive_peripherals",
    "toggle_peripheral",
]
