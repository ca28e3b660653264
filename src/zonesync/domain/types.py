"""Core value types shared by adapters and the reconciler."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

type ServiceName = str
type Address = str
type DesiredState = dict[ServiceName, list[Address]]
"""Service name -> addresses currently advertised for it."""


class RecordKind(StrEnum):
    """DNS record kinds the zone store may report.

    Only ``A`` records are ever created; the other members exist so listings that
    contain foreign kinds still parse.
    """

    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    FWD = "FWD"
    MX = "MX"
    NS = "NS"
    NXDOMAIN = "NXDOMAIN"
    SRV = "SRV"
    TXT = "TXT"


@dataclass(frozen=True, slots=True, kw_only=True)
class ManagedRecord:
    """One address binding in the zone.

    ``id`` is assigned by the zone store and stays empty until the record is created.
    ``comment`` holds the ownership tag.
    """

    name: str
    address: str | None = None
    kind: RecordKind = RecordKind.A
    comment: str | None = None
    id: str = ""

    @property
    def is_address_binding(self) -> bool:
        return self.kind is RecordKind.A and bool(self.address)

    def with_id(self, record_id: str) -> ManagedRecord:
        return replace(self, id=record_id)


def qualify(name: str, domain: str) -> str:
    """Return the fully-qualified record name for service ``name``."""

    return f"{name}.{domain}"
