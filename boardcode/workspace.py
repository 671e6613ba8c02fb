"""Host-side state record tying configuration edits to generated documents."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .config import BoardCodeConfig, CommonPeripheral
from .document.splitter import split_blocks
from .document.structure import extract_structure
from .hardware.deriver import (
    COMMON_PERIPHERALS,
    add_common_peripherals,
    derive_from_text,
    toggle_peripheral,
)
from .hardware.examples import DEFAULT_FEATURES, default_config_text, get_example
from .hardware.fields import get_field, update_field
from .llm.runner import GenerationClient
from .logging import get_logger
from .models import DerivationOutcome, DocumentBlock, PeripheralItem, StructureResult
from .prompting import SYSTEM_INSTRUCTION, build_generation_payload, build_user_prompt

PLATFORM_PATH = ("board", "sdk")


class Workspace:
    """Owns the editable state; every update goes through the pure derivation functions."""

    def __init__(
        self,
        config_text: str | None = None,
        *,
        features: str = DEFAULT_FEATURES,
        settings: BoardCodeConfig | None = None,
    ) -> None:
        self.settings = settings
        self.logger = get_logger("workspace")
        self.config_text = ""
        self.features = features
        self.peripherals: List[PeripheralItem] = []
        self.last_error: Optional[str] = None
        self.document: Optional[str] = None
        self.blocks: List[DocumentBlock] = []
        self.structure: Optional[StructureResult] = None
        self.edit_config(config_text if config_text is not None else default_config_text())

    @property
    def platform(self) -> str:
        value = get_field(self.config_text, PLATFORM_PATH)
        if isinstance(value, str) and value:
            return value
        if self.settings is not None and self.settings.default_platform:
            return self.settings.default_platform
        return ""

    @property
    def common_catalog(self) -> Sequence[CommonPeripheral]:
        if self.settings is not None and self.settings.common_peripherals:
            return self.settings.common_peripherals
        return COMMON_PERIPHERALS

    def edit_config(self, text: str) -> DerivationOutcome:
        """Replace the configuration text and re-derive the peripheral list."""
        self.config_text = text
        outcome = derive_from_text(text, self.peripherals)
        self.peripherals = outcome.value
        self.last_error = outcome.error
        if outcome.used_fallback:
            self.logger.debug("Showing last known peripherals (%d)", len(self.peripherals))
        return outcome

    def set_field(self, path: Sequence[str], value: object) -> DerivationOutcome:
        return self.edit_config(update_field(self.config_text, path, value))

    def toggle(self, identity: str) -> List[PeripheralItem]:
        self.peripherals = toggle_peripheral(self.peripherals, identity)
        return self.peripherals

    def add_common(self, catalog: Iterable[CommonPeripheral] | None = None) -> List[PeripheralItem]:
        self.peripherals = add_common_peripherals(
            self.peripherals, catalog if catalog is not None else self.common_catalog
        )
        return self.peripherals

    def load_example(self, example_id: str) -> DerivationOutcome:
        example = get_example(example_id)
        if example is None:
            raise KeyError(f"Unknown example: {example_id}")
        self.features = example.features
        return self.edit_config(example.config_text())

    def accept_document(self, text: str) -> List[DocumentBlock]:
        """Store a newly generated document and recompute its derived views."""
        self.document = text
        self.blocks = split_blocks(text)
        self.structure = extract_structure(text, self.platform)
        self.logger.debug(
            "Document split into %d blocks (tree %s)",
            len(self.blocks),
            "extracted" if self.structure.extracted else "from template",
        )
        return self.blocks

    def current_structure(self) -> StructureResult:
        """Tree for the current document, or the platform template before any document."""
        if self.structure is not None:
            return self.structure
        return extract_structure(None, self.platform)

    def generate(self, client: GenerationClient) -> List[DocumentBlock]:
        """Request a document for the current state and accept it.

        Raises HardwareConfigError for unparsable configuration text and
        GenerationError when the service fails; state is untouched in both cases.
        """
        payload = build_generation_payload(self.config_text, self.peripherals, self.features)
        self.logger.info(
            "Requesting generation for %d active peripherals",
            len(payload["user_requirements"]["active_peripherals"]),
        )
        text = client.generate(build_user_prompt(payload), system=SYSTEM_INSTRUCTION)
        return self.accept_document(text)


__all__ = ["PLATFORM_PATH", "Workspace"]
