"""Public interface for the RouterOS zone adapter."""

from __future__ import annotations

from .client import STATIC_DNS_PATH, RouterOSZone
from .schema import StaticRecordPayload

__all__ = ["STATIC_DNS_PATH", "RouterOSZone", "StaticRecordPayload"]
