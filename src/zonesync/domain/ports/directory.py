"""Port for reading desired state from a service directory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from zonesync.domain.types import DesiredState


@runtime_checkable
class ServiceDirectory(Protocol):
    """Lists the addresses serving each service, optionally filtered by tag."""

    def list_services(self, tag: str) -> DesiredState:
        ...


__all__ = ["ServiceDirectory"]
