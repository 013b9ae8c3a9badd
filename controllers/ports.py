# controllers/ports.py
"""Boundary protocols for the preference-panel core.

The controllers never touch a widget toolkit directly. They drive these
small, capability-oriented handles; ui/controls.py and ui/common.py adapt
customtkinter widgets to them, and the tests use plain fakes.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from models.validation_status import ValidationStatus


ChangeListener = Callable[[], None]
ExpansionListener = Callable[["SectionHandle", bool], None]


@runtime_checkable
class PreferenceStore(Protocol):
    """Staged key-value store. Writes are buffered until the owner commits."""

    def get_boolean(self, key: str) -> bool:
        """Current (staged) value of key as a bool."""

    def get_string(self, key: str) -> str:
        """Current (staged) value of key as a string; "" when unset."""

    def set_value(self, key: str, value: Any) -> None:
        """Stage a new value for key."""


@runtime_checkable
class BooleanControl(Protocol):
    """A checkbox-like control."""

    @property
    def selection(self) -> bool: ...

    def set_selection(self, selected: bool) -> None: ...

    @property
    def enabled(self) -> bool: ...

    def set_enabled(self, enabled: bool) -> None: ...

    def add_change_listener(self, listener: ChangeListener) -> None: ...

    def remove_change_listener(self, listener: ChangeListener) -> None: ...

    def add_indent(self, pixels: int) -> None: ...


@runtime_checkable
class TextControl(Protocol):
    """A single-line text entry."""

    @property
    def text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def set_text_limit(self, limit: int) -> None: ...

    @property
    def enabled(self) -> bool: ...

    def set_enabled(self, enabled: bool) -> None: ...

    def add_change_listener(self, listener: ChangeListener) -> None: ...

    def remove_change_listener(self, listener: ChangeListener) -> None: ...

    def add_indent(self, pixels: int) -> None: ...


@runtime_checkable
class SectionHandle(Protocol):
    """A collapsible section.

    set_expanded() is programmatic and must not notify expansion listeners;
    listeners fire for user toggles as listener(section, expanded).
    """

    @property
    def expanded(self) -> bool: ...

    def set_expanded(self, expanded: bool) -> None: ...

    @property
    def text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    @property
    def client(self) -> Any: ...

    def add_expansion_listener(self, listener: ExpansionListener) -> None: ...

    def remove_expansion_listener(self, listener: ExpansionListener) -> None: ...

    def invalidate_layout(self) -> None: ...

    def set_emphasis(self, bold: bool) -> None: ...


@runtime_checkable
class SectionFactory(Protocol):
    """Creates the toolkit containers SectionManager lays sections into."""

    def create_body(self, parent: Any) -> Any:
        """Create the container that holds all sections; return it."""

    def create_section(self, body: Any, label: str) -> SectionHandle:
        """Create a collapsed section titled label inside body."""

    def create_group(self, parent: Any, label: str) -> Any:
        """Create a plain, always-visible titled group; return its container."""


@runtime_checkable
class ValiditySink(Protocol):
    """The host page that shows the panel's status."""

    def set_valid(self, valid: bool) -> None:
        """Enable/disable the host's proceed (OK/Apply) affordance."""

    def show_status(self, status: "ValidationStatus") -> None:
        """Render status in the host's status line."""
