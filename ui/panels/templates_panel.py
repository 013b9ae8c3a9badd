# ui/panels/templates_panel.py
from __future__ import annotations

import customtkinter as ctk

from models.preference_model import TemplatePreferences
from ui.panels.base_panel import BasePanel

F = TemplatePreferences.model_fields


class TemplatesPanel(BasePanel):
    """File-header template settings, laid out as plain (non-collapsible) groups."""
    page_title = "Templates"

    def build(self, parent: ctk.CTkFrame):
        self.frame = parent

        header = self.create_subsection(parent, None, "File header", factory=self.factory)
        chk_insert = self.add_check_box(header, "Insert a header into new files", F["insert_header"].alias)
        _, ent_author = self.add_labelled_text_field(header, "Author", F["author"].alias, 40,
                                                     tooltip="40 characters max")
        _, ent_org = self.add_labelled_text_field(header, "Organization", F["organization"].alias, 60)
        chk_date = self.add_check_box(header, "Add revision date", F["revision_date"].alias)
        for slave in (ent_author, ent_org, chk_date):
            self.create_dependency(chk_insert, slave)
