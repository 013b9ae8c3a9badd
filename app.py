# app.py
from __future__ import annotations
import argparse
import logging
import queue
from pathlib import Path
from typing import Dict, Optional

import customtkinter as ctk

from controllers.preference_store import OverlayPreferenceStore, PreferenceFile, default_home
from models.preference_model import dialog_defaults, preference_defaults
from models.validation_status import StatusKind, ValidationStatus, most_severe
from ui.logging_utils import drain, route_logging_to_queue
from ui.panels.base_panel import BasePanel
from ui.panels.editor_panel import EditorPanel
from ui.panels.templates_panel import TemplatesPanel

log = logging.getLogger(__name__)

PREFERENCES_FILE = "preferences.json"
DIALOG_SETTINGS_FILE = "dialog_settings.json"

_STATUS_COLORS = {
    StatusKind.OK: None,
    StatusKind.INFO: None,
    StatusKind.WARNING: "orange",
    StatusKind.ERROR: "tomato",
}


class App(ctk.CTk):
    """Preferences window: one tab per panel, OK/Apply/Defaults/Cancel, log box."""

    def __init__(self, home: Optional[Path] = None):
        super().__init__()
        self.title("Preferences")
        self.geometry("980x720")

        # Logging -> UI queue
        self.log_q: "queue.Queue[str]" = queue.Queue()
        route_logging_to_queue(self.log_q, logging.INFO)

        # Stores: preferences are staged in an overlay until OK/Apply
        if home is not None:
            try:
                home.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                log.warning("Cannot use %s (%s); preferences stay in memory", home, e)
                home = None
        else:
            home = default_home()
        self.prefs = PreferenceFile(PREFERENCES_FILE, home=home, defaults=preference_defaults())
        self.prefs.load()
        self.dialog_settings = PreferenceFile(DIALOG_SETTINGS_FILE, home=home, defaults=dialog_defaults())
        self.dialog_settings.load()
        self.store = OverlayPreferenceStore(self.prefs)
        self._panel_status: Dict[str, ValidationStatus] = {}
        self._panel_valid: Dict[str, bool] = {}

        # Layout
        self.columnconfigure(0, weight=3)
        self.columnconfigure(1, weight=2)
        self.rowconfigure(0, weight=1)

        self.tabs = ctk.CTkTabview(self)
        self.tabs.grid(row=0, column=0, sticky="nsew", padx=(8, 4), pady=8)

        self.right = ctk.CTkFrame(self)
        self.right.grid(row=0, column=1, sticky="nsew", padx=(4, 8), pady=8)
        self.right.columnconfigure(0, weight=1)
        self.right.rowconfigure(1, weight=1)

        self.status_lbl = ctk.CTkLabel(self.right, text="", anchor="w", wraplength=320)
        self.status_lbl.grid(row=0, column=0, sticky="ew", padx=8, pady=(6, 4))
        self._default_status_color = self.status_lbl.cget("text_color")

        self.log_box = ctk.CTkTextbox(self.right, height=360)
        self.log_box.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))
        self.log_box.configure(state="disabled")

        # Button bar
        bar = ctk.CTkFrame(self.right, fg_color="transparent")
        bar.grid(row=2, column=0, sticky="ew", padx=8, pady=(0, 8))
        self.btn_defaults = ctk.CTkButton(bar, text="Restore Defaults", width=120, command=self._on_defaults_clicked)
        self.btn_defaults.pack(side="left")
        self.btn_cancel = ctk.CTkButton(bar, text="Cancel", width=80, command=self._on_cancel_clicked)
        self.btn_cancel.pack(side="right")
        self.btn_ok = ctk.CTkButton(bar, text="OK", width=80, command=self._on_ok_clicked)
        self.btn_ok.pack(side="right", padx=(0, 6))
        self.btn_apply = ctk.CTkButton(bar, text="Apply", width=80, command=self._on_apply_clicked)
        self.btn_apply.pack(side="right", padx=(0, 6))

        # --- PANELS ---
        self.panels: Dict[str, BasePanel] = {}
        self._build_panels()

        self.protocol("WM_DELETE_WINDOW", self._on_cancel_clicked)
        self.after(150, self._poll_logs)
        log.info("Preferences loaded from %s", self.prefs.path or "(memory only)")

    def _build_panels(self):
        for panel_class in (EditorPanel, TemplatesPanel):
            sink = _PanelSink(self, panel_class.page_title)
            panel = panel_class(self.store, host=sink, dialog_store=self.dialog_settings)
            tab = self.tabs.add(panel.page_title)
            scroll = ctk.CTkScrollableFrame(tab)
            scroll.pack(fill="both", expand=True)
            panel.build(scroll)
            panel.initialize()
            self.panels[panel.page_title] = panel

    # ---------------- Validity sink ----------------
    def panel_validity_changed(self, title: str, valid: bool):
        self._panel_valid[title] = valid
        state = "normal" if all(self._panel_valid.values()) else "disabled"
        self.btn_ok.configure(state=state)
        self.btn_apply.configure(state=state)

    def panel_status_changed(self, title: str, status: ValidationStatus):
        self._panel_status[title] = status
        worst = most_severe(self._panel_status.values())
        owner = next((t for t, s in self._panel_status.items() if s is worst), title)
        color = _STATUS_COLORS.get(worst.kind) or self._default_status_color
        self.status_lbl.configure(text="" if worst.is_ok() else f"{owner}: {worst.message}", text_color=color)

    # ---------------- Buttons ----------------
    def _commit(self) -> bool:
        for panel in self.panels.values():
            panel.perform_ok()
        self.store.propagate()
        ok = self.prefs.save()
        if not ok:
            log.warning("Preferences kept in memory only; could not write %s", self.prefs.path)
        return ok

    def _on_apply_clicked(self):
        self._commit()

    def _on_ok_clicked(self):
        self._commit()
        self._close()

    def _on_defaults_clicked(self):
        tab = self.tabs.get()
        panel = self.panels.get(tab)
        if panel is None:
            return
        self.store.load_defaults(panel.bindings.keys())
        panel.perform_defaults()
        log.info("Restored defaults for %s", tab)

    def _on_cancel_clicked(self):
        self.store.discard()
        self._close()

    def _close(self):
        for panel in self.panels.values():
            panel.dispose()
        # Section memory is kept whether the dialog was confirmed or not.
        self.dialog_settings.save()
        self.destroy()

    # ---------------- Log box ----------------
    def _poll_logs(self):
        lines = drain(self.log_q)
        if lines:
            self.log_box.configure(state="normal")
            for line in lines:
                self.log_box.insert("end", line + "\n")
            self.log_box.see("end")
            self.log_box.configure(state="disabled")
        self.after(150, self._poll_logs)


class _PanelSink:
    """ValiditySink that forwards one panel's status to the window."""

    def __init__(self, app: App, title: str):
        self._app = app
        self._title = title

    def set_valid(self, valid: bool) -> None:
        self._app.panel_validity_changed(self._title, valid)

    def show_status(self, status: ValidationStatus) -> None:
        self._app.panel_status_changed(self._title, status)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preferences window")
    parser.add_argument("--home", type=Path, default=None,
                        help="directory holding preferences.json (default: $PREFERENCE_PANEL_HOME or ~/.preference_panel)")
    parser.add_argument("--appearance", choices=("dark", "light", "system"), default="dark")
    return parser.parse_args(argv)


if __name__ == "__main__":
    # Logging is routed to the UI; avoid console basicConfig
    args = parse_args()
    ctk.set_appearance_mode(args.appearance)
    app = App(home=args.home)
    app.mainloop()
