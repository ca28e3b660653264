"""Port for the remote record store holding the managed zone."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from zonesync.domain.types import ManagedRecord

type RecordField = Literal["name", "address", "comment"]


@runtime_checkable
class ZoneStore(Protocol):
    """Exact-match listing plus create and delete of address records."""

    def list_by_field(self, field: RecordField, value: str) -> list[ManagedRecord]:
        ...

    def create(self, record: ManagedRecord) -> ManagedRecord:
        ...

    def delete(self, record: ManagedRecord) -> None:
        ...


__all__ = ["RecordField", "ZoneStore"]
