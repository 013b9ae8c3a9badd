from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

log = logging.getLogger(__name__)

HOME_ENV = "PREFERENCE_PANEL_HOME"
HOME_DIR_NAME = ".preference_panel"

_MISSING = object()


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True or value == 1


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def default_home() -> Optional[Path]:
    """Per-user directory for preference files; None if it can't be created."""
    home = Path(os.environ.get(HOME_ENV) or (Path.home() / HOME_DIR_NAME)).expanduser()
    try:
        home.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.critical("Failed to create preference directory at %s: %s", home, e)
        return None
    return home


class PreferenceFile:
    """Tiny JSON-backed preference store.

    Values written with set_value() live in memory until save(). Keys that
    were never written fall back to the defaults given at construction.
    If no directory is available the store still works, it just never
    reaches the disk.
    """

    def __init__(self, filename: str, home: Optional[Path] = None, defaults: Optional[Dict[str, Any]] = None) -> None:
        self.home = home if home is not None else default_home()
        self.filename = filename
        self.defaults: Dict[str, Any] = dict(defaults or {})
        self._values: Dict[str, Any] = {}

    @property
    def path(self) -> Optional[Path]:
        if self.home is None:
            return None
        return self.home / self.filename

    def load(self) -> Dict[str, Any]:
        p = self.path
        if p is None or not p.exists():
            self._values = {}
            return {}
        try:
            data = json.loads(p.read_text(encoding="utf-8")) or {}
        except (OSError, ValueError) as e:
            log.warning("[prefs] failed to read %s: %s", p, e)
            data = {}
        if not isinstance(data, dict):
            log.warning("[prefs] ignoring %s: not a JSON object", p)
            data = {}
        self._values = data
        return dict(data)

    def save(self) -> bool:
        p = self.path
        if p is None:
            return False
        try:
            p.write_text(json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8")
            return True
        except OSError as e:
            log.warning("[prefs] failed to write %s: %s", p, e)
            return False

    # ---------------- Store contract ----------------

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._values:
            return self._values[key]
        return self.defaults.get(key, default)

    def get_boolean(self, key: str) -> bool:
        return _as_bool(self.get(key, False))

    def get_string(self, key: str) -> str:
        return _as_str(self.get(key, ""))

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get_default(self, key: str) -> Any:
        return self.defaults.get(key)


class OverlayPreferenceStore:
    """
    Stages edits over a parent store.
      - set_value() only touches the overlay
      - reads go overlay -> parent
      - propagate() commits the overlay to the parent (caller saves the parent)
      - discard() drops staged edits
    """

    def __init__(self, parent: PreferenceFile) -> None:
        self._parent = parent
        self._staged: Dict[str, Any] = {}

    @property
    def parent(self) -> PreferenceFile:
        return self._parent

    def _lookup(self, key: str) -> Any:
        value = self._staged.get(key, _MISSING)
        if value is _MISSING:
            return self._parent.get(key)
        return value

    def get_boolean(self, key: str) -> bool:
        return _as_bool(self._lookup(key))

    def get_string(self, key: str) -> str:
        return _as_str(self._lookup(key))

    def set_value(self, key: str, value: Any) -> None:
        self._staged[key] = value

    def load_defaults(self, keys: Iterable[str]) -> None:
        """Stage the parent's default for each key."""
        for key in keys:
            self._staged[key] = self._parent.get_default(key)

    def needs_saving(self) -> bool:
        return any(self._parent.get(k, _MISSING) != v for k, v in self._staged.items())

    def staged(self) -> Dict[str, Any]:
        return dict(self._staged)

    def propagate(self) -> None:
        for key, value in self._staged.items():
            self._parent.set_value(key, value)
        log.info("[prefs] committed %d staged value(s)", len(self._staged))
        self._staged.clear()

    def discard(self) -> None:
        self._staged.clear()
