"""Fold Nomad service payloads into desired state."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from zonesync.domain.types import DesiredState

    from .schema import ServiceRegistration, ServiceStub


def is_selected(stub: ServiceStub, tag: str) -> bool:
    """An empty tag selects every service."""

    return not tag or tag in stub.tags


def add_registrations(
    state: DesiredState,
    service_name: str,
    registrations: Iterable[ServiceRegistration],
) -> None:
    """Append each registration's address under ``service_name``.

    Names are not namespaced: the same service in two namespaces shares one entry.
    """

    addresses = state.setdefault(service_name, [])
    addresses.extend(reg.address for reg in registrations if reg.address)
