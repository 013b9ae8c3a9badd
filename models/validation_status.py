from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict


class StatusKind(IntEnum):
    # Ordered by severity so max() picks the worst one.
    OK = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class ValidationStatus(BaseModel):
    """Immutable feedback about a field (or the whole panel).

    OK carries an empty message; everything else carries the text shown in
    the host page's status line.
    """
    model_config = ConfigDict(frozen=True)

    kind: StatusKind = StatusKind.OK
    message: str = ""

    # ---------------- Factories ----------------

    @classmethod
    def ok(cls) -> "ValidationStatus":
        return _OK

    @classmethod
    def info(cls, message: str) -> "ValidationStatus":
        return cls(kind=StatusKind.INFO, message=message)

    @classmethod
    def warning(cls, message: str) -> "ValidationStatus":
        return cls(kind=StatusKind.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> "ValidationStatus":
        return cls(kind=StatusKind.ERROR, message=message)

    # ---------------- Queries ----------------

    def is_ok(self) -> bool:
        return self.kind == StatusKind.OK

    def is_error(self) -> bool:
        return self.kind == StatusKind.ERROR

    def matches(self, kind: StatusKind) -> bool:
        return self.kind == kind

    def __str__(self) -> str:
        if self.is_ok():
            return "OK"
        return f"{self.kind.name}: {self.message}"


_OK = ValidationStatus()


def most_severe(statuses: Iterable[Optional[ValidationStatus]]) -> ValidationStatus:
    """Return the worst status; on a tie the later one wins. Empty -> OK."""
    worst = _OK
    for status in statuses:
        if status is not None and status.kind >= worst.kind:
            worst = status
    return worst
