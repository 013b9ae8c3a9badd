from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

# Dialog-settings key: which editor section was open last.
LAST_OPEN_EDITOR = "editor.last_open_section"


class EditorPreferences(BaseModel):
    """Editor preference keys (aliases) and their default values."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # General
    show_line_numbers: bool = Field(True, alias="editor.general.show_line_numbers")
    highlight_current_line: bool = Field(True, alias="editor.general.highlight_current_line")
    show_print_margin: bool = Field(False, alias="editor.general.show_print_margin")
    print_margin_column: str = Field("80", alias="editor.general.print_margin_column")

    # Typing
    close_strings: bool = Field(True, alias="editor.typing.close_strings")
    close_brackets: bool = Field(True, alias="editor.typing.close_brackets")
    smart_tab: bool = Field(True, alias="editor.typing.smart_tab")
    spaces_for_tabs: bool = Field(True, alias="editor.typing.spaces_for_tabs")
    tab_width: str = Field("4", alias="editor.typing.tab_width")
    indent_size: str = Field("2", alias="editor.typing.indent_size")

    # Folding
    folding_enabled: bool = Field(True, alias="editor.folding.enabled")
    fold_comments: bool = Field(False, alias="editor.folding.comments")
    fold_comment_min_lines: str = Field("3", alias="editor.folding.comment_min_lines")


class TemplatePreferences(BaseModel):
    """File-header template keys and defaults."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    insert_header: bool = Field(False, alias="templates.insert_header")
    author: str = Field("", alias="templates.author")
    organization: str = Field("", alias="templates.organization")
    revision_date: bool = Field(True, alias="templates.revision_date")


def preference_defaults() -> Dict[str, Any]:
    """Every preference key mapped to its default value."""
    out: Dict[str, Any] = {}
    for model in (EditorPreferences(), TemplatePreferences()):
        out.update(model.model_dump(by_alias=True))
    return out


def dialog_defaults() -> Dict[str, Any]:
    return {LAST_OPEN_EDITOR: ""}
