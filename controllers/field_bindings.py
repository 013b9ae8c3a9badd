# controllers/field_bindings.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from controllers.errors import BindingError, require
from controllers.ports import PreferenceStore
from models.validation_status import ValidationStatus
from ui.validator import Validator

log = logging.getLogger(__name__)


class BindingKind(Enum):
    BOOLEAN = "boolean"
    TEXT = "text"
    NUMBER = "number"


@dataclass
class BindingEntry:
    control: Any
    key: str
    kind: BindingKind
    limit: Optional[int] = None
    listener: Optional[Callable[[], None]] = field(default=None, repr=False)


StatusCallback = Callable[[Any, ValidationStatus], None]


class FieldBindingRegistry:
    """
    Table of control -> preference key bindings.
      - Edits flow control -> store through one listener per entry
      - load_all() flows store -> controls without re-entering those listeners
      - Number fields are validated first; rejected text never reaches the store
      - detach_all() is a walk over the table
    """

    def __init__(self, store: PreferenceStore, on_status: Optional[StatusCallback] = None) -> None:
        self._store = require(store, "store")
        self._on_status = on_status
        self._entries: Dict[int, BindingEntry] = {}
        self._keys: Dict[str, BindingEntry] = {}
        self._statuses: Dict[int, ValidationStatus] = {}
        self._loading = False

    # ---------------- Registration ----------------

    def bind_boolean(self, control, key: str) -> BindingEntry:
        entry = self._register(control, key, BindingKind.BOOLEAN, None)

        def _on_toggle() -> None:
            if self._loading:
                return
            self._store.set_value(key, bool(control.selection))

        self._attach(entry, _on_toggle)
        return entry

    def bind_text(self, control, key: str, limit: int) -> BindingEntry:
        entry = self._register(control, key, BindingKind.TEXT, limit)
        control.set_text_limit(limit)

        def _on_edit() -> None:
            if self._loading:
                return
            self._store.set_value(key, control.text)

        self._attach(entry, _on_edit)
        return entry

    def bind_number(self, control, key: str, limit: int) -> BindingEntry:
        entry = self._register(control, key, BindingKind.NUMBER, limit)
        control.set_text_limit(limit)

        def _on_edit() -> None:
            if self._loading:
                return
            self.number_field_changed(control)

        self._attach(entry, _on_edit)
        return entry

    def _register(self, control, key: str, kind: BindingKind, limit: Optional[int]) -> BindingEntry:
        require(control, "control")
        require(key, "key")
        if id(control) in self._entries:
            log.error("Control already bound to %r", self._entries[id(control)].key)
            raise BindingError(f"control is already bound to {self._entries[id(control)].key!r}")
        if key in self._keys:
            log.error("Preference key %r already bound", key)
            raise BindingError(f"preference key {key!r} is already bound to another control")
        entry = BindingEntry(control=control, key=key, kind=kind, limit=limit)
        self._entries[id(control)] = entry
        self._keys[key] = entry
        log.debug("bound %s field to %r", kind.value, key)
        return entry

    @staticmethod
    def _attach(entry: BindingEntry, listener: Callable[[], None]) -> None:
        entry.listener = listener
        entry.control.add_change_listener(listener)

    # ---------------- Number fields ----------------

    def number_field_changed(self, control) -> ValidationStatus:
        """Validate a number field's text; commit it only when it is OK."""
        entry = self._entries.get(id(control))
        if entry is None or entry.kind is not BindingKind.NUMBER:
            raise BindingError("control is not a bound number field")
        number = control.text
        status = Validator.validate_positive_number(number)
        if not status.is_error():
            self._store.set_value(entry.key, number)
        else:
            log.info("Rejected %r for %s: %s", number, entry.key, status.message)
        # Keep only the latest result, ordered by recency.
        self._statuses.pop(id(control), None)
        self._statuses[id(control)] = status
        if self._on_status is not None:
            self._on_status(control, status)
        return status

    def statuses(self) -> List[ValidationStatus]:
        """Latest status per number field, oldest edit first."""
        return list(self._statuses.values())

    def clear_statuses(self) -> None:
        self._statuses.clear()

    # ---------------- Store -> controls ----------------

    def load_all(self) -> None:
        """Push the store's current values into every bound control."""
        self._loading = True
        try:
            for entry in self._entries.values():
                if entry.kind is BindingKind.BOOLEAN:
                    entry.control.set_selection(self._store.get_boolean(entry.key))
                else:
                    entry.control.set_text(self._store.get_string(entry.key))
        finally:
            self._loading = False
        log.debug("loaded %d bound fields", len(self._entries))

    # ---------------- Lookup / lifecycle ----------------

    def keys(self) -> List[str]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._entries)

    def detach_all(self) -> None:
        for entry in self._entries.values():
            if entry.listener is not None:
                entry.control.remove_change_listener(entry.listener)
                entry.listener = None
        self._entries.clear()
        self._keys.clear()
        self._statuses.clear()
