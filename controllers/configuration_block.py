# controllers/configuration_block.py
from __future__ import annotations

import logging
from typing import Any, Optional

from controllers.dependency_graph import DependencyGraph
from controllers.errors import require
from controllers.field_bindings import FieldBindingRegistry
from controllers.ports import PreferenceStore, SectionFactory, ValiditySink
from controllers.section_manager import SectionManager
from models.validation_status import ValidationStatus, most_severe

log = logging.getLogger(__name__)


class ConfigurationBlockController:
    """
    One block of preferences on a host page.
      - Owns the field bindings, the enable dependencies and the section manager
      - Loads store -> controls on initialize()/perform_defaults()
      - Tracks the worst outstanding field status and mirrors it to the host
      - Works headless: without a host, status is kept but not pushed anywhere
    """

    def __init__(self, store: PreferenceStore, host: Optional[ValiditySink] = None) -> None:
        self._store = require(store, "store")
        self._host = host
        self._status = ValidationStatus.ok()
        self._disposed = False
        self.bindings = FieldBindingRegistry(store, on_status=self._field_status_changed)
        self.dependencies = DependencyGraph()
        self.sections: Optional[SectionManager] = None

    # ---------------- Wiring ----------------

    def create_section_manager(
        self,
        factory: Optional[SectionFactory] = None,
        dialog_store: Optional[PreferenceStore] = None,
        last_open_key: Optional[str] = None,
    ) -> SectionManager:
        if self.sections is not None:
            self.sections.dispose()
        self.sections = SectionManager(factory, dialog_store, last_open_key)
        return self.sections

    def create_subsection(self, parent, manager: Optional[SectionManager], label: str, factory: Optional[SectionFactory] = None) -> Any:
        """Collapsible section when a manager is given, plain titled group otherwise."""
        if manager is not None:
            return manager.create_section(label)
        return require(factory, "factory").create_group(parent, label)

    def get_preference_store(self) -> PreferenceStore:
        return self._store

    # ---------------- Lifecycle ----------------

    def initialize(self) -> None:
        self.bindings.load_all()
        self.dependencies.evaluate_all()
        self.bindings.clear_statuses()
        self.update_status(ValidationStatus.ok())

    def perform_ok(self) -> None:
        """Nothing to flush: every binding writes through on edit."""
        log.debug("perform_ok: %d bound fields already staged", len(self.bindings))

    def apply_changes(self) -> None:
        self.perform_ok()

    def perform_defaults(self) -> None:
        """Reload from the store, which the caller has already reset to defaults."""
        self.initialize()

    def reset_to_defaults(self) -> None:
        self.perform_defaults()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.bindings.detach_all()
        self.dependencies.detach_all()
        if self.sections is not None:
            self.sections.dispose()
        log.debug("%s disposed", type(self).__name__)

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ---------------- Status ----------------

    @property
    def status(self) -> ValidationStatus:
        return self._status

    def get_status(self) -> ValidationStatus:
        return self._status

    def _field_status_changed(self, control, status: ValidationStatus) -> None:
        self.update_status(most_severe(self.bindings.statuses()))

    def update_status(self, status: ValidationStatus) -> None:
        self._status = status
        if self._host is None:
            return
        self._host.set_valid(status.is_ok())
        self._host.show_status(status)
