# controllers/section_manager.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from controllers.errors import SectionError, require
from controllers.ports import PreferenceStore, SectionFactory, SectionHandle

log = logging.getLogger(__name__)

# Persisted value meaning "keep every section closed".
NONE = "__none"


class SectionManager:
    """
    Keeps at most one collapsible section open and remembers which.

    The last-open label is read from / written to an optional dialog-settings
    store. Sections are remembered by label, so renaming one forgets it.
    """

    def __init__(
        self,
        factory: Optional[SectionFactory] = None,
        store: Optional[PreferenceStore] = None,
        last_open_key: Optional[str] = None,
    ) -> None:
        self._factory = factory
        self._store = store
        self._last_open_key = last_open_key
        self._sections: List[SectionHandle] = []
        self._first: Optional[SectionHandle] = None
        self._body: Any = None
        self._managing = False
        self._disposed = False

    @property
    def persists(self) -> bool:
        return self._store is not None and self._last_open_key is not None and not self._disposed

    # ---------------- Construction ----------------

    def create_section_container(self, parent) -> Any:
        """Create the body all sections are laid out in. Once per manager."""
        if self._body is not None:
            raise SectionError("section container already created")
        if self._factory is None:
            raise SectionError("no section factory configured")
        self._body = self._factory.create_body(parent)
        return self._body

    def create_section(self, label: str) -> Any:
        """Create and register a section; return its client container."""
        if self._body is None:
            log.error("create_section(%r) called before create_section_container()", label)
            raise SectionError("create_section_container() must be called first")
        section = self._factory.create_section(self._body, label)
        section.set_text(label)
        self.manage(section)
        return section.client

    def manage(self, section: SectionHandle) -> None:
        """Register a section and resolve its initial expansion state."""
        require(section, "section")
        if any(s is section for s in self._sections):
            return
        if self._first is None:
            self._first = section
        label = section.text
        last = self._last_open()

        if (section is self._first and last != NONE) or label == last:
            section.set_expanded(True)
            self._with_guard(self._collapse_all_but, section)
        else:
            section.set_expanded(False)

        section.set_emphasis(True)
        self._sections.append(section)
        section.add_expansion_listener(self._expansion_state_changed)
        log.debug("section %r registered (expanded=%s)", label, section.expanded)

    # ---------------- Transitions ----------------

    def on_user_expand(self, section: SectionHandle) -> None:
        """section -> expanded, every other section -> collapsed."""
        if self._managing:
            return
        self._managing = True
        try:
            section.set_expanded(True)
            self._collapse_all_but(section)
        finally:
            self._managing = False
        self._remember(section.text)

    def on_user_collapse(self, section: SectionHandle) -> None:
        if self._managing:
            return
        self._with_guard(section.set_expanded, False)
        self._remember(NONE)

    def _collapse_all_but(self, section: SectionHandle) -> None:
        for other in self._sections:
            if other is not section and other.expanded:
                other.set_expanded(False)

    def _expansion_state_changed(self, section: SectionHandle, expanded: bool) -> None:
        section.set_emphasis(True)
        if not self._managing:
            if expanded:
                self.on_user_expand(section)
            else:
                self.on_user_collapse(section)
        section.invalidate_layout()

    # ---------------- Persistence ----------------

    def _last_open(self) -> Optional[str]:
        if not self.persists:
            return None
        return self._store.get_string(self._last_open_key)

    def _remember(self, value: str) -> None:
        if self.persists:
            log.debug("last open section -> %r", value)
            self._store.set_value(self._last_open_key, value)

    def _with_guard(self, fn, *args) -> None:
        self._managing = True
        try:
            fn(*args)
        finally:
            self._managing = False

    # ---------------- Lookup / lifecycle ----------------

    def sections(self) -> List[SectionHandle]:
        return list(self._sections)

    def expanded_sections(self) -> List[SectionHandle]:
        return [s for s in self._sections if s.expanded]

    def find(self, label: str) -> Optional[SectionHandle]:
        for s in self._sections:
            if s.text == label:
                return s
        return None

    def dispose(self) -> None:
        for s in self._sections:
            s.remove_expansion_listener(self._expansion_state_changed)
        self._sections.clear()
        self._first = None
        self._disposed = True
