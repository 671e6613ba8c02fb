"""Core data models shared across boardcode components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class McuInfo:
    """Microcontroller identity from the board section."""

    vendor: Optional[str] = None
    part: Optional[str] = None
    package: Optional[str] = None


@dataclass
class BoardIdentity:
    """Board/device identity: vendor, part, platform SDK and target language."""

    name: Optional[str] = None
    vendor: Optional[str] = None
    mcu: McuInfo = field(default_factory=McuInfo)
    sdk: Optional[str] = None
    language: Optional[str] = None


@dataclass
class SignalMapping:
    """A single signal-to-pin mapping on a bus interface."""

    signal: Optional[str] = None
    mcu_pin: Optional[str] = None
    net: Optional[str] = None


@dataclass
class AttachedDevice:
    """A device hanging off a bus interface."""

    ref: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


@dataclass
class BusInterface:
    """A bus such as I2C1 or SPI2 together with its pins and devices."""

    name: Optional[str] = None
    signals: List[SignalMapping] = field(default_factory=list)
    devices: List[AttachedDevice] = field(default_factory=list)


@dataclass
class GpioNet:
    """A named GPIO net."""

    net: Optional[str] = None
    mcu_pin: Optional[str] = None
    direction: Optional[str] = None
    pull: Optional[str] = None
    active_level: Optional[str] = None


@dataclass
class ChannelItem:
    """An entry of a simple peripheral array (UART/ADC/PWM)."""

    peripheral: Optional[str] = None
    timer: Optional[str] = None
    channel: Optional[str] = None
    mcu_pin: Optional[str] = None
    net: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Connectivity:
    """The netlist-derived connectivity section."""

    interfaces: List[BusInterface] = field(default_factory=list)
    gpio: List[GpioNet] = field(default_factory=list)
    uart: List[ChannelItem] = field(default_factory=list)
    adc: List[ChannelItem] = field(default_factory=list)
    pwm: List[ChannelItem] = field(default_factory=list)


@dataclass
class HardwareConfig:
    """Typed view of a hardware configuration document."""

    board: BoardIdentity = field(default_factory=BoardIdentity)
    connectivity: Connectivity = field(default_factory=Connectivity)
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def platform(self) -> str:
        return self.board.sdk or ""


@dataclass
class PeripheralItem:
    """An addressable hardware capability shown to the user."""

    identity: str
    display_type: str
    selected: bool = True
    pinned: bool = False


@dataclass
class DerivationOutcome:
    """Result of deriving peripherals from configuration text."""

    value: List[PeripheralItem]
    used_fallback: bool = False
    error: Optional[str] = None


@dataclass
class ProseBlock:
    """Paragraph-level chunk of prose."""

    text: str
    kind: str = field(default="prose", init=False)


@dataclass
class CodeBlock:
    """Fenced code; content is raw and never inline-rendered."""

    content: str
    language: Optional[str] = None
    kind: str = field(default="code", init=False)


@dataclass
class TableBlock:
    """Pipe table with a header row and a row-major grid of cells."""

    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)
    kind: str = field(default="table", init=False)


DocumentBlock = Union[ProseBlock, CodeBlock, TableBlock]


@dataclass
class StructureResult:
    """Project tree either extracted from a document or taken from a template."""

    text: str
    extracted: bool
    lines: List[str] = field(default_factory=list)
    platform: str = ""

    @property
    def used_fallback(self) -> bool:
        return not self.extracted
