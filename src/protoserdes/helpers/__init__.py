"""Internal helpers for protoserdes."""

from __future__ import annotations

from .lock import RWLock

__all__ = [
    "RWLock",
]
