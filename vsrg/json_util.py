"""Helpers for reading values out of parsed JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_if_exists(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """Return ``data[key]`` if the key is present, else ``default``."""
    if key in data:
        return data[key]
    return default


def get_mandatory(data: Mapping[str, Any], key: str) -> Any:
    """Return ``data[key]``; raise KeyError if it is absent or null."""
    value = data.get(key)
    if value is None:
        raise KeyError(f"'{key}' must be specified")
    return value