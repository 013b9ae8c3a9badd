"""Plain stand-ins for the store, controls, sections and host page."""

from __future__ import annotations

from typing import Any, Dict, List


class FakeStore:
    def __init__(self, values: Dict[str, Any] | None = None):
        self.values: Dict[str, Any] = dict(values or {})
        self.writes: List[tuple] = []

    def get_boolean(self, key: str) -> bool:
        return bool(self.values.get(key, False))

    def get_string(self, key: str) -> str:
        value = self.values.get(key)
        return "" if value is None else str(value)

    def set_value(self, key: str, value: Any) -> None:
        self.writes.append((key, value))
        self.values[key] = value


class _Control:
    def __init__(self):
        self.enabled = True
        self.indent = 0
        self.listeners: List = []

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)

    def add_change_listener(self, listener) -> None:
        self.listeners.append(listener)

    def remove_change_listener(self, listener) -> None:
        self.listeners.remove(listener)

    def add_indent(self, pixels: int) -> None:
        self.indent += pixels

    def fire(self) -> None:
        for listener in list(self.listeners):
            listener()


class FakeCheckBox(_Control):
    """Programmatic set_selection() is silent; click() notifies."""

    def __init__(self, selection: bool = False):
        super().__init__()
        self.selection = selection

    def set_selection(self, selected: bool) -> None:
        self.selection = bool(selected)

    def click(self) -> None:
        self.selection = not self.selection
        self.fire()

    def check(self, selected: bool) -> None:
        if self.selection != selected:
            self.click()


class FakeText(_Control):
    """Like a Tk StringVar trace: every set_text() notifies."""

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text
        self.limit = None

    def set_text(self, text: str) -> None:
        self.text = text
        self.fire()

    def set_text_limit(self, limit: int) -> None:
        self.limit = limit

    def type(self, text: str) -> None:
        self.set_text(text)


class FakeSection:
    def __init__(self, label: str, notify_on_set: bool = False):
        self.text = label
        self.expanded = False
        self.notify_on_set = notify_on_set
        self.listeners: List = []
        self.client = {"section": label}
        self.layouts = 0
        self.bold = False

    def set_expanded(self, expanded: bool) -> None:
        changed = self.expanded != bool(expanded)
        self.expanded = bool(expanded)
        if changed and self.notify_on_set:
            self._notify()

    def set_text(self, text: str) -> None:
        self.text = text

    def add_expansion_listener(self, listener) -> None:
        self.listeners.append(listener)

    def remove_expansion_listener(self, listener) -> None:
        self.listeners.remove(listener)

    def invalidate_layout(self) -> None:
        self.layouts += 1

    def set_emphasis(self, bold: bool) -> None:
        self.bold = bold

    def _notify(self) -> None:
        for listener in list(self.listeners):
            listener(self, self.expanded)

    def user_toggle(self) -> None:
        self.expanded = not self.expanded
        self._notify()


class FakeSectionFactory:
    def __init__(self, notify_on_set: bool = False):
        self.notify_on_set = notify_on_set
        self.bodies: List = []
        self.sections: List[FakeSection] = []
        self.groups: List[tuple] = []

    def create_body(self, parent):
        body = {"parent": parent}
        self.bodies.append(body)
        return body

    def create_section(self, body, label: str) -> FakeSection:
        section = FakeSection(label, notify_on_set=self.notify_on_set)
        self.sections.append(section)
        return section

    def create_group(self, parent, label: str):
        group = {"group": label, "parent": parent}
        self.groups.append(group)
        return group


class FakeSink:
    def __init__(self):
        self.valid: List[bool] = []
        self.statuses: List = []

    def set_valid(self, valid: bool) -> None:
        self.valid.append(valid)

    def show_status(self, status) -> None:
        self.statuses.append(status)
