"""Operator configuration store (credentials and setup flags)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from icons_toolkit.core.exceptions import ConfigurationError
from icons_toolkit.core.files import read_json, write_json
from icons_toolkit.core.logging import get_logger

log = get_logger("store")


class ConfigStore:
    """Flat key-value JSON file holding operator credentials and setup flags"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Dict[str, Any] = {}

    def load(self) -> None:
        """Load the file; a missing file leaves the store empty"""
        if not self.path.exists():
            self._data = {}
            return
        try:
            data = read_json(self.path)
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Failed to read config file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {self.path} must contain a JSON object")
        self._data = data

    def unlink(self) -> None:
        self.path.unlink(missing_ok=True)
        self._data = {}

    def _write(self, data: Dict[str, Any]) -> None:
        write_json(self.path, data, readable=False)
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get a key"""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a key and persist"""
        data = dict(self._data)
        data[key] = value
        self._write(data)

    def replace(self, values: Dict[str, Any]) -> None:
        """Replace the whole store with ``values``"""
        self._write(dict(values))

    def delete(self, key: str) -> None:
        """Delete a key and persist"""
        data = dict(self._data)
        data.pop(key, None)
        self._write(data)

    # -------------------------------------------------------------------------
    # Typed accessors
    # -------------------------------------------------------------------------
    @property
    def is_setup(self) -> bool:
        return bool(self.get("setup", False))

    @property
    def is_unsafe(self) -> bool:
        return bool(self.get("unsafe", False))

    def credentials(self) -> tuple[Optional[str], Optional[str]]:
        return self.get("key"), self.get("secret")


def open_store(path: Path) -> ConfigStore:
    """Load the store; a corrupt file is removed and treated as not configured."""
    store = ConfigStore(path)
    try:
        store.load()
    except ConfigurationError as exc:
        log.error(f"{exc}. Removing it, run 'setup' again.")
        store.unlink()
    return store
