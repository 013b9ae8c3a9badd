# controllers/dependency_graph.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from controllers.errors import DependencyError, require

log = logging.getLogger(__name__)

# Extra indentation (px) applied to a dependent control.
INDENT = 20


@dataclass(frozen=True)
class DependencyEdge:
    master: Any
    slave: Any


class DependencyGraph:
    """
    Master/slave enable rules: a slave is enabled only while its master is
    checked and itself enabled. A slave that is also a master passes the
    change on to its own slaves, so chains settle in one pass.
    """

    def __init__(self) -> None:
        self._edges: List[DependencyEdge] = []
        self._master_of: Dict[int, Any] = {}
        self._listeners: Dict[int, tuple] = {}  # id(master) -> (master, listener)

    def add_dependency(self, master, slave) -> DependencyEdge:
        require(master, "master")
        require(slave, "slave")
        if id(slave) in self._master_of:
            log.error("Slave control already has a master")
            raise DependencyError("slave control is already driven by another master")

        slave.add_indent(INDENT)
        edge = DependencyEdge(master=master, slave=slave)
        self._edges.append(edge)
        self._master_of[id(slave)] = master

        if id(master) not in self._listeners:
            def _on_master_changed(m=master) -> None:
                self.evaluate(m)

            master.add_change_listener(_on_master_changed)
            self._listeners[id(master)] = (master, _on_master_changed)
        return edge

    # ---------------- Evaluation ----------------

    def evaluate(self, master) -> None:
        """Re-derive the enabled state of master's slaves (and theirs)."""
        state = bool(master.selection) and bool(master.enabled)
        for edge in self._edges:
            if edge.master is master:
                edge.slave.set_enabled(state)
                if id(edge.slave) in self._listeners:
                    self.evaluate(edge.slave)

    def evaluate_all(self) -> None:
        """Apply every edge once; listeners don't fire for existing state."""
        seen = set()
        for edge in self._edges:
            if id(edge.master) not in seen:
                seen.add(id(edge.master))
                self.evaluate(edge.master)

    # ---------------- Lookup / lifecycle ----------------

    def slaves_of(self, master) -> List[Any]:
        return [e.slave for e in self._edges if e.master is master]

    def master_of(self, slave) -> Optional[Any]:
        return self._master_of.get(id(slave))

    def detach_all(self) -> None:
        for master, listener in self._listeners.values():
            master.remove_change_listener(listener)
        self._listeners.clear()
        self._edges.clear()
        self._master_of.clear()
