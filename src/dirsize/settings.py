"""JSON-backed store for the last analysed folder and window geometry."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dirsize.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "dirsize"
_SETTINGS_FILE = "settings.json"

LAST_DIRECTORY_KEY = "general.last_directory"
WINDOW_WIDTH_KEY = "window.width"
WINDOW_HEIGHT_KEY = "window.height"
WINDOW_MAXIMIZED_KEY = "window.maximized"


class Settings:
    """Persistent settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("window.width")  # reads data["window"]["width"]
        settings.set("window.width", 900)  # writes + saves
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Set a value by dot-notation key and persist to disk."""
        self.update({key: value})

    def update(self, values: dict[str, Any]) -> None:
        """Set several dot-notation keys with a single write."""
        for key, value in values.items():
            parts = key.split(".")
            node = self._data
            for part in parts[:-1]:
                if part not in node or not isinstance(node[part], dict):
                    node[part] = {}
                node = node[part]
            node[parts[-1]] = value
        self._save()

    def last_directory(self) -> str | None:
        """Last analysed folder, if it still exists."""
        path = self.get(LAST_DIRECTORY_KEY)
        if isinstance(path, str) and path and Path(path).is_dir():
            return path
        return None

    def save_last_directory(self, path: str | Path) -> None:
        """Remember *path* if it is an existing directory."""
        if Path(path).is_dir():
            self.set(LAST_DIRECTORY_KEY, str(path))

    def window_size(self) -> tuple[int, int] | None:
        """Saved ``(width, height)``, or None when unset or invalid."""
        width = self.get(WINDOW_WIDTH_KEY)
        height = self.get(WINDOW_HEIGHT_KEY)
        if isinstance(width, int) and isinstance(height, int) and width > 0 and height > 0:
            return width, height
        return None

    def save_window_state(self, width: int, height: int, maximized: bool) -> None:
        self.update({
            WINDOW_WIDTH_KEY: width,
            WINDOW_HEIGHT_KEY: height,
            WINDOW_MAXIMIZED_KEY: maximized,
        })

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            self._data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            self._data = {}
        if not isinstance(self._data, dict):
            log.warning("Ignoring malformed settings in %s", self._path)
            self._data = {}

    def _save(self) -> None:
        """Persist settings to disk."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(self._data, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            log.warning("Could not save settings to %s: %s", self._path, e)
