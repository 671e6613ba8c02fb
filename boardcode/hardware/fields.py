"""Read and update individual fields of configuration text by key path."""

from __future__ import annotations

import json
from typing import Any, Sequence


def get_field(text: str, path: Sequence[str]) -> Any:
    """Return the value at ``path`` or ``""`` when missing or unparsable."""
    try:
        current: Any = json.loads(text)
    except json.JSONDecodeError:
        return ""
    for key in path:
        if not isinstance(current, dict):
            return ""
        current = current.get(key)
    return current or ""


def update_field(text: str, path: Sequence[str], value: Any) -> str:
    """Set ``path`` to ``value`` and re-serialise; unparsable text is returned as is."""
    if not path:
        return text
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return text
    if not isinstance(data, dict):
        return text

    current = data
    for key in path[:-1]:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[path[-1]] = value
    return json.dumps(data, indent=2, ensure_ascii=False)


__all__ = ["get_field", "update_field"]
