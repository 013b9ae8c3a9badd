# ui/common.py
from __future__ import annotations
from typing import Callable, List, Optional

import customtkinter as ctk
from CTkToolTip import CTkToolTip

from ui.controls import CheckBoxControl, TextFieldControl

_CONTENT_PACK = dict(fill="x", padx=6, pady=(4, 6))


class CollapsibleSection:
    """
    Header (chevron + bold title) over a content frame hidden via pack_forget().
    Clicking the header is a user toggle and notifies expansion listeners;
    set_expanded() only updates the visuals.
    """

    def __init__(self, parent: ctk.CTkFrame, title: str, open: bool = False):
        self._expanded = open
        self._listeners: List[Callable] = []

        self.wrapper = ctk.CTkFrame(parent)
        self.wrapper.pack(fill="x", padx=6, pady=(6, 0))

        self.header = ctk.CTkFrame(self.wrapper)
        self.header.pack(fill="x")

        self.chevron = ctk.CTkLabel(self.header, text=("▼" if open else "▶"), width=12)
        self.chevron.pack(side="left", padx=(6, 6))
        self.title_lbl = ctk.CTkLabel(self.header, text=title, font=ctk.CTkFont(size=14, weight="bold"))
        self.title_lbl.pack(side="left", pady=4)

        self.content = ctk.CTkFrame(self.wrapper)
        if open:
            self.content.pack(**_CONTENT_PACK)

        for w in (self.header, self.chevron, self.title_lbl):
            w.bind("<Button-1>", lambda _e: self.toggle())

    # ---- SectionHandle ----
    @property
    def expanded(self) -> bool:
        return self._expanded

    def set_expanded(self, expanded: bool) -> None:
        expanded = bool(expanded)
        if expanded == self._expanded:
            return
        self._expanded = expanded
        if expanded:
            self.chevron.configure(text="▼")
            self.content.pack(**_CONTENT_PACK)
        else:
            self.chevron.configure(text="▶")
            self.content.pack_forget()

    @property
    def text(self) -> str:
        return self.title_lbl.cget("text")

    def set_text(self, text: str) -> None:
        self.title_lbl.configure(text=text)

    @property
    def client(self) -> ctk.CTkFrame:
        return self.content

    def add_expansion_listener(self, listener: Callable) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_expansion_listener(self, listener: Callable) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def invalidate_layout(self) -> None:
        self.wrapper.update_idletasks()

    def set_emphasis(self, bold: bool) -> None:
        self.title_lbl.configure(font=ctk.CTkFont(size=14, weight=("bold" if bold else "normal")))

    # ---- user input ----
    def toggle(self) -> None:
        self.set_expanded(not self._expanded)
        for listener in list(self._listeners):
            listener(self, self._expanded)


class CtkSectionFactory:
    """SectionFactory for customtkinter pages."""

    def create_body(self, parent: ctk.CTkFrame) -> ctk.CTkFrame:
        body = ctk.CTkFrame(parent, fg_color="transparent")
        body.pack(fill="both", expand=True)
        return body

    def create_section(self, body: ctk.CTkFrame, label: str) -> CollapsibleSection:
        return CollapsibleSection(body, label, open=False)

    def create_group(self, parent: ctk.CTkFrame, label: str) -> ctk.CTkFrame:
        group = ctk.CTkFrame(parent)
        group.pack(fill="x", padx=6, pady=(6, 0))
        ctk.CTkLabel(group, text=label, font=ctk.CTkFont(size=14, weight="bold")).pack(anchor="w", padx=6, pady=4)
        content = ctk.CTkFrame(group)
        content.pack(**_CONTENT_PACK)
        return content


def create_setting_row(
    parent: ctk.CTkFrame,
    label_text: str,
    row_index: int,
    *,
    kind: str = "entry",
    indentation: int = 0,
    tooltip: Optional[str] = None,
):
    """
    Standardized two-column layout:
      - Column 0: Label (checkboxes carry their own text and span both columns)
      - Column 1: Entry
    Returns (label_widget_or_None, control adapter).
    """
    parent.grid_columnconfigure(0, weight=0)
    parent.grid_columnconfigure(1, weight=1)
    padx = (6 + indentation, 6)

    if kind == "checkbox":
        var = ctk.BooleanVar(value=False)
        widget = ctk.CTkCheckBox(parent, text=label_text, variable=var)
        widget.grid(row=row_index, column=0, columnspan=2, padx=padx, pady=4, sticky="w")
        control = CheckBoxControl(widget, var, padx=padx)
        lbl = None
    else:
        lbl = ctk.CTkLabel(parent, text=label_text)
        lbl.grid(row=row_index, column=0, padx=padx, pady=4, sticky="w")
        var = ctk.StringVar(value="")
        widget = ctk.CTkEntry(parent, textvariable=var)
        widget.grid(row=row_index, column=1, padx=6, pady=4, sticky="ew")
        control = TextFieldControl(widget, var, label=lbl, padx=padx)

    if tooltip:
        CTkToolTip(widget, message=tooltip)
    return lbl, control
