"""Pydantic models describing the Nomad HTTP API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _none_to_empty(value: object) -> object:
    return [] if value is None else value


class NomadBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NamespacePayload(NomadBaseModel):
    name: str = Field(alias="Name")
    description: str | None = Field(default=None, alias="Description")


class ServiceStub(NomadBaseModel):
    service_name: str = Field(alias="ServiceName")
    tags: list[str] = Field(default_factory=list, alias="Tags")

    _normalize_tags = field_validator("tags", mode="before")(_none_to_empty)


class NamespaceServices(NomadBaseModel):
    namespace: str = Field(alias="Namespace")
    services: list[ServiceStub] = Field(default_factory=list, alias="Services")

    _normalize_services = field_validator("services", mode="before")(_none_to_empty)


class ServiceRegistration(NomadBaseModel):
    id: str = Field(alias="ID")
    service_name: str = Field(alias="ServiceName")
    namespace: str = Field(alias="Namespace")
    address: str = Field(alias="Address")
    port: int = Field(default=0, alias="Port")
    node_id: str | None = Field(default=None, alias="NodeID")
    alloc_id: str | None = Field(default=None, alias="AllocID")
    tags: list[str] = Field(default_factory=list, alias="Tags")

    _normalize_tags = field_validator("tags", mode="before")(_none_to_empty)


NamespaceList = TypeAdapter(list[NamespacePayload])
ServiceListResponse = TypeAdapter(list[NamespaceServices])
RegistrationList = TypeAdapter(list[ServiceRegistration])
