"""Domain port definitions for adapters."""

from __future__ import annotations

from .directory import ServiceDirectory
from .zone import RecordField, ZoneStore

__all__ = [
    "RecordField",
    "ServiceDirectory",
    "ZoneStore",
]
