# ui/panels/editor_panel.py
from __future__ import annotations

import customtkinter as ctk

from models.preference_model import LAST_OPEN_EDITOR, EditorPreferences
from ui.panels.base_panel import BasePanel

F = EditorPreferences.model_fields


def _key(name: str) -> str:
    return F[name].alias


class EditorPanel(BasePanel):
    page_title = "Editor"
    last_open_key = LAST_OPEN_EDITOR

    def build(self, parent: ctk.CTkFrame):
        manager = self.create_section_manager(self.factory, self.dialog_store, self.last_open_key)
        self.frame = manager.create_section_container(parent)

        # -- General --
        general = self.create_subsection(parent, manager, "General")
        self.add_check_box(general, "Show line numbers", _key("show_line_numbers"))
        self.add_check_box(general, "Highlight current line", _key("highlight_current_line"))
        chk_margin = self.add_check_box(general, "Show print margin", _key("show_print_margin"))
        _, ent_margin = self.add_labelled_text_field(
            general, "Print margin column", _key("print_margin_column"), 3, is_number=True,
            tooltip="Column of the print margin (0..999)")
        self.create_dependency(chk_margin, ent_margin)

        # -- Typing --
        typing = self.create_subsection(parent, manager, "Typing")
        self.add_check_box(typing, "Automatically close strings", _key("close_strings"))
        self.add_check_box(typing, "Automatically close brackets", _key("close_brackets"))
        chk_smart_tab = self.add_check_box(typing, "Smart Tab key", _key("smart_tab"),
                                           tooltip="Tab indents the line instead of inserting a tab")
        chk_spaces = self.add_check_box(typing, "Insert spaces for tabs", _key("spaces_for_tabs"))
        self.create_dependency(chk_smart_tab, chk_spaces)
        _, ent_tab = self.add_labelled_text_field(typing, "Tab width", _key("tab_width"), 2, is_number=True)
        _, ent_indent = self.add_labelled_text_field(typing, "Indent size", _key("indent_size"), 2, is_number=True)
        self.create_dependency(chk_spaces, ent_indent)

        # -- Folding -- (enable -> fold comments -> minimum lines)
        folding = self.create_subsection(parent, manager, "Folding")
        chk_folding = self.add_check_box(folding, "Enable folding", _key("folding_enabled"))
        chk_comments = self.add_check_box(folding, "Fold comments when opening a file", _key("fold_comments"))
        self.create_dependency(chk_folding, chk_comments)
        _, ent_min = self.add_labelled_text_field(
            folding, "Minimum comment lines", _key("fold_comment_min_lines"), 3, is_number=True)
        self.create_dependency(chk_comments, ent_min)
