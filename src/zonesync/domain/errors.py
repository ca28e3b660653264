"""Errors raised while talking to the directory or the zone store."""

from __future__ import annotations


class DirectoryError(RuntimeError):
    """Raised when the service directory cannot be enumerated completely."""


class ZoneError(RuntimeError):
    """Base class for zone-store failures."""


class ZoneTransportError(ZoneError):
    """Raised when the zone store cannot be reached or the request times out."""


class ZoneRejectedError(ZoneError):
    """Raised when the zone store answers a mutation with an unexpected status."""

    def __init__(self, message: str, *, record_name: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.record_name = record_name
        self.status_code = status_code


class ZoneResponseError(ZoneError):
    """Raised when a zone-store response does not parse into records."""
