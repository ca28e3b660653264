"""Single-pass convergence of a managed zone towards the directory's desired state.

Creation is driven per service name: the name is the natural key for "does this
binding already exist". Deletion is driven by one zone-wide scan for the ownership
tag, which also catches services that vanished from the directory entirely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from zonesync.domain.types import ManagedRecord, RecordKind, qualify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from zonesync.domain.ports import ZoneStore
    from zonesync.domain.types import DesiredState

log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileResult:
    """What one pass did to the zone."""

    created: list[ManagedRecord] = field(default_factory=list)
    retained: list[ManagedRecord] = field(default_factory=list)
    deleted: list[ManagedRecord] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.created or self.deleted)


@dataclass(slots=True)
class ZoneReconciler:
    """Make the records tagged ``tag`` in ``zone`` match a desired state."""

    zone: ZoneStore
    domain: str

    def reconcile(self, tag: str, desired: DesiredState) -> ReconcileResult:
        """Create missing bindings, then prune tagged records nothing claimed.

        The first failing create or delete aborts the pass; records already touched
        stay as they are and the next pass picks up from there.
        """

        if not tag:
            raise ValueError("An ownership tag is required to reconcile a zone")

        result = ReconcileResult()
        seen: set[str] = set()

        for name, addresses in desired.items():
            self._converge_name(name, addresses, tag=tag, seen=seen, result=result)

        for record in self.zone.list_by_field("comment", tag):
            if record.id in seen:
                continue
            log.info("Deleting stale record %s (%s -> %s)", record.id, record.name, record.address)
            self.zone.delete(record)
            result.deleted.append(record)

        log.info(
            "Reconciled tag %r: created=%s, retained=%s, deleted=%s",
            tag,
            len(result.created),
            len(result.retained),
            len(result.deleted),
        )
        return result

    def _converge_name(
        self,
        name: str,
        addresses: Iterable[str],
        *,
        tag: str,
        seen: set[str],
        result: ReconcileResult,
    ) -> None:
        fqdn = qualify(name, self.domain)
        existing = _index_by_address(self.zone.list_by_field("name", fqdn), tag=tag)

        # dict.fromkeys collapses repeated addresses.
        for address in dict.fromkeys(addresses):
            current = existing.pop(address, None)
            if current is not None:
                seen.add(current.id)
                result.retained.append(current)
                continue

            created = self.zone.create(
                ManagedRecord(name=fqdn, address=address, kind=RecordKind.A, comment=tag)
            )
            log.info("Created record %s (%s -> %s)", created.id, fqdn, address)
            seen.add(created.id)
            result.created.append(created)


def reconcile(
    zone: ZoneStore, tag: str, desired: DesiredState, *, domain: str
) -> ReconcileResult:
    """Run one pass of ``ZoneReconciler`` over ``zone``."""
    return ZoneReconciler(zone=zone, domain=domain).reconcile(tag, desired)


def _index_by_address(records: Iterable[ManagedRecord], *, tag: str) -> dict[str, ManagedRecord]:
    # Only bindings carrying our tag count as present.
    index: dict[str, ManagedRecord] = {}
    for record in records:
        if record.comment != tag or not record.is_address_binding or record.address is None:
            continue
        index.setdefault(record.address, record)
    return index
