"""Persisted preferences for the CLI.

The core only talks to the ``get``/``set`` interface, so tests can hand it an
``InMemorySettingsStore`` instead of touching the user's settings file.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import click
from loguru import logger

APP_NAME = "unifmt"
ASTYLE_PATH_KEY = "UniFmt.AstylePath"
DEFAULT_ASTYLE_PATH = "astyle"


def default_settings_file() -> Path:
    """Return the per-user settings file location."""
    return Path(click.get_app_dir(APP_NAME)) / "settings.json"


class SettingsStore:
    """Key-value preference store."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        raise NotImplementedError


class InMemorySettingsStore(SettingsStore):
    """Settings held in a dict, used by tests and throwaway sessions."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value


class JsonSettingsStore(SettingsStore):
    """Settings kept in a JSON object on disk.

    The file is re-read on every access and rewritten on every ``set``,
    preserving keys this tool does not know about.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_settings_file()

    def _load(self) -> Dict[str, Any]:
        try:
            if self.path.exists():
                data = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return data
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
        return {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
