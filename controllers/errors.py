# controllers/errors.py
from __future__ import annotations


class BindingError(ValueError):
    """A control or preference key was bound twice."""


class DependencyError(ValueError):
    """A slave control was given a second master."""


class SectionError(RuntimeError):
    """Sections were created out of order (no container, or two containers)."""


def require(value, name: str):
    """Return value, or raise ValueError when a required argument is missing."""
    if value is None:
        raise ValueError(f"{name} is required")
    return value
