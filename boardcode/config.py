"""Settings loading for boardcode (.boardcode.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class ConfigError(RuntimeError):
    """Raised when the settings file cannot be parsed."""


@dataclass
class LLMConfig:
    """Generation service settings from .boardcode.yml."""

    model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    request_timeout: Optional[float] = None


@dataclass
class CommonPeripheral:
    """A catalog entry the user can pin independently of the configuration."""

    name: str
    type: str


@dataclass
class BoardCodeConfig:
    """Represents the high-level settings defined in .boardcode.yml."""

    root: Path
    llm: Optional[LLMConfig] = None
    default_platform: Optional[str] = None
    common_peripherals: List[CommonPeripheral] = field(default_factory=list)


def load_config(config_path: Path) -> BoardCodeConfig:
    """Load settings from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BoardCodeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(".boardcode.yml must contain a mapping at the root")

    llm_data = _as_dict(data.get("llm"))
    llm = None
    if llm_data:
        llm = LLMConfig(
            model=_as_str(llm_data.get("model")),
            temperature=_as_float(llm_data.get("temperature")),
            max_tokens=_as_int(llm_data.get("max_tokens")),
            base_url=_as_str(llm_data.get("base_url")),
            api_key=_as_str(llm_data.get("api_key")),
            request_timeout=_as_float(llm_data.get("request_timeout")),
        )
        if not any(
            (
                llm.model,
                llm.temperature,
                llm.max_tokens,
                llm.base_url,
                llm.api_key,
                llm.request_timeout,
            )
        ):
            llm = None

    board_data = _as_dict(data.get("board"))
    default_platform = _as_str(board_data.get("platform")) if board_data else None

    common: List[CommonPeripheral] = []
    for entry in _as_list(data.get("common_peripherals")):
        entry_data = _as_dict(entry)
        name = _as_str(entry_data.get("name"))
        if not name:
            continue
        common.append(CommonPeripheral(name=name, type=_as_str(entry_data.get("type")) or "Sys"))

    return BoardCodeConfig(
        root=root,
        llm=llm,
        default_platform=default_platform,
        common_peripherals=common,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / ".boardcode.yml").resolve()
    if config_path.name != ".boardcode.yml":
        return (config_path.parent / ".boardcode.yml").resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
