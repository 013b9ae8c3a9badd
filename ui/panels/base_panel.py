# ui/panels/base_panel.py
from __future__ import annotations
from typing import Optional, Tuple

import customtkinter as ctk

from controllers.configuration_block import ConfigurationBlockController
from controllers.ports import PreferenceStore, ValiditySink
from ui.common import CtkSectionFactory, create_setting_row


class BasePanel(ConfigurationBlockController):
    """
    A ConfigurationBlockController that builds its own customtkinter widgets.
    - build(parent): create sections and controls (subclasses)
    - add_check_box / add_labelled_text_field: create a row and bind it
    - create_dependency: enable a control only while a checkbox is on
    """
    page_title: str = ""
    last_open_key: Optional[str] = None

    def __init__(self, store: PreferenceStore, host: Optional[ValiditySink] = None,
                 dialog_store: Optional[PreferenceStore] = None):
        super().__init__(store, host)
        self.factory = CtkSectionFactory()
        self.dialog_store = dialog_store
        self.frame: ctk.CTkFrame | None = None
        self._rows: dict = {}

    def build(self, parent: ctk.CTkFrame): ...

    def _next_row(self, parent) -> int:
        row = self._rows.get(id(parent), 0)
        self._rows[id(parent)] = row + 1
        return row

    def add_check_box(self, parent: ctk.CTkFrame, label: str, key: str, indentation: int = 0,
                      tooltip: Optional[str] = None):
        _, control = create_setting_row(parent, label, self._next_row(parent), kind="checkbox",
                                        indentation=indentation, tooltip=tooltip)
        self.bindings.bind_boolean(control, key)
        return control

    def add_labelled_text_field(self, parent: ctk.CTkFrame, label: str, key: str, text_limit: int,
                                indentation: int = 0, is_number: bool = False,
                                tooltip: Optional[str] = None) -> Tuple[ctk.CTkLabel, object]:
        lbl, control = create_setting_row(parent, label, self._next_row(parent),
                                          indentation=indentation, tooltip=tooltip)
        if is_number:
            self.bindings.bind_number(control, key, text_limit)
        else:
            self.bindings.bind_text(control, key, text_limit)
        return lbl, control

    def create_dependency(self, master, slave) -> None:
        self.dependencies.add_dependency(master, slave)
