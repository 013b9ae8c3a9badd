# ui/controls.py
from __future__ import annotations
from typing import Callable, List, Optional, Tuple

import customtkinter as ctk

from ui.validator import Validator

_DISABLED_FG = "gray25"
_DISABLED_TEXT = "gray50"


class _GridIndentMixin:
    """Shifts a gridded widget (and its label) right by a number of pixels.

    Tracks the unscaled padx it was gridded with and re-grids through
    ``widget.grid`` so CTk applies its widget scaling to the new value.
    """

    _padx: Tuple[int, int] = (0, 0)

    def _indent_widgets(self) -> List[ctk.CTkBaseClass]:
        return [self.widget]

    def add_indent(self, pixels: int) -> None:
        left, right = self._padx
        self._padx = (left + pixels, right)
        for w in self._indent_widgets():
            if w.grid_info():
                w.grid(padx=self._padx)


class CheckBoxControl(_GridIndentMixin):
    """BooleanControl over a CTkCheckBox. Listeners fire on clicks only."""

    def __init__(self, widget: ctk.CTkCheckBox, var: ctk.BooleanVar, padx: Tuple[int, int] = (0, 0)):
        self.widget = widget
        self.var = var
        self._padx = padx
        self._listeners: List[Callable[[], None]] = []
        widget.configure(command=self._fire)

    def _fire(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def selection(self) -> bool:
        return bool(self.var.get())

    def set_selection(self, selected: bool) -> None:
        self.var.set(bool(selected))

    @property
    def enabled(self) -> bool:
        return self.widget.cget("state") != "disabled"

    def set_enabled(self, enabled: bool) -> None:
        self.widget.configure(state=("normal" if enabled else "disabled"))

    def add_change_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_change_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


class TextFieldControl(_GridIndentMixin):
    """TextControl over a CTkEntry bound to a StringVar.

    Listeners fire on every write to the variable, programmatic ones included.
    """

    def __init__(
        self,
        widget: ctk.CTkEntry,
        var: ctk.StringVar,
        label: Optional[ctk.CTkLabel] = None,
        padx: Tuple[int, int] = (0, 0),
    ):
        self.widget = widget
        self.var = var
        self.label = label
        self._padx = padx
        self._listeners: List[Callable[[], None]] = []
        self._default_fg_color = widget.cget("fg_color")
        self._default_text_color = widget.cget("text_color")
        var.trace_add("write", lambda *_: self._fire())

    def _indent_widgets(self):
        return [self.label] if self.label is not None else [self.widget]

    def _fire(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def text(self) -> str:
        return self.var.get()

    def set_text(self, text: str) -> None:
        self.var.set(text)

    def set_text_limit(self, limit: int) -> None:
        validate_len_cmd = self.widget.register(Validator.validate_string_length)
        self.widget.configure(validate="key", validatecommand=(validate_len_cmd, str(limit), "%P"))
        # Width hint: one char wider than the limit.
        self.widget.configure(width=max(60, (limit + 1) * 10))

    @property
    def enabled(self) -> bool:
        return self.widget.cget("state") != "disabled"

    def set_enabled(self, enabled: bool) -> None:
        if enabled:
            self.widget.configure(state="normal", fg_color=self._default_fg_color, text_color=self._default_text_color)
        else:
            self.widget.configure(state="disabled", fg_color=_DISABLED_FG, text_color=_DISABLED_TEXT)
        if self.label is not None:
            self.label.configure(state=("normal" if enabled else "disabled"))

    def add_change_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_change_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
