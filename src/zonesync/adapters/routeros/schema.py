"""Pydantic models for RouterOS ``/ip/dns/static`` entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from zonesync.domain.types import ManagedRecord, RecordKind


class RouterOSBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StaticRecordPayload(RouterOSBaseModel):
    """One static DNS entry as RouterOS reports it.

    RouterOS leaves ``type`` out for plain A records.
    """

    id: str | None = Field(default=None, alias=".id")
    name: str | None = None
    address: str | None = None
    type: RecordKind = RecordKind.A
    comment: str | None = None
    disabled: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _upper_type(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def to_record(self) -> ManagedRecord:
        return ManagedRecord(
            id=self.id or "",
            name=self.name or "",
            address=self.address,
            kind=self.type,
            comment=self.comment,
        )

    @classmethod
    def from_record(cls, record: ManagedRecord) -> StaticRecordPayload:
        return cls(
            id=record.id or None,
            name=record.name,
            address=record.address,
            type=record.kind,
            comment=record.comment,
        )

    def create_body(self) -> dict[str, object]:
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"id", "disabled"},
        )


StaticRecordList = TypeAdapter(list[StaticRecordPayload])
