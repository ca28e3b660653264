"""HTTP client for the Nomad service catalogue."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, cast
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from zonesync.adapters.http_transport import TransportClient
from zonesync.config.nomad import NomadConfig, get_nomad_config
from zonesync.domain.errors import DirectoryError
from zonesync.domain.ports import ServiceDirectory

from .schema import (
    NamespaceList,
    NamespacePayload,
    NamespaceServices,
    RegistrationList,
    ServiceListResponse,
    ServiceRegistration,
)
from .translator import add_registrations, is_selected

if TYPE_CHECKING:
    from collections.abc import Callable

    from zonesync.config.http_transport import TransportConfig
    from zonesync.domain.types import DesiredState

log = getLogger(__name__)


def _default_client_factory(config: TransportConfig) -> TransportClient:
    return TransportClient(config)


@dataclass(slots=True)
class NomadDirectory:
    """Reads service membership across every namespace the token can see.

    Pagination is not supported; each listing is expected to fit in one response.
    """

    config: NomadConfig = field(default_factory=get_nomad_config)
    client_factory: Callable[[TransportConfig], TransportClient] = field(
        default=_default_client_factory
    )

    def list_services(self, tag: str) -> DesiredState:
        state: DesiredState = {}
        with self.client_factory(self.config.transport()) as client:
            for namespace in self._namespaces(client):
                for group in self._services(client, namespace.name):
                    for stub in group.services:
                        if not is_selected(stub, tag):
                            continue
                        registrations = self._registrations(
                            client, stub.service_name, namespace.name
                        )
                        add_registrations(state, stub.service_name, registrations)

        log.info(
            "Nomad listed %s service(s) with %s address(es) for tag %r",
            len(state),
            sum(len(addresses) for addresses in state.values()),
            tag,
        )
        return state

    def _namespaces(self, client: TransportClient) -> list[NamespacePayload]:
        return self._fetch(client, "/v1/namespaces", NamespaceList)

    def _services(self, client: TransportClient, namespace: str) -> list[NamespaceServices]:
        return self._fetch(
            client, "/v1/services", ServiceListResponse, params={"namespace": namespace}
        )

    def _registrations(
        self, client: TransportClient, service_name: str, namespace: str
    ) -> list[ServiceRegistration]:
        return self._fetch(
            client,
            f"/v1/service/{quote(service_name, safe='')}",
            RegistrationList,
            params={"namespace": namespace},
        )

    def _fetch[T](
        self,
        client: TransportClient,
        path: str,
        adapter: TypeAdapter[list[T]],
        *,
        params: dict[str, str] | None = None,
    ) -> list[T]:
        try:
            response = client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise DirectoryError(f"Nomad request {path} failed: {exc}") from exc

        if not response.is_success:
            raise DirectoryError(
                f"Nomad request {path} returned HTTP {response.status_code}: "
                f"{response.text.strip()}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise DirectoryError(f"Nomad request {path} returned invalid JSON") from exc

        try:
            return cast(list[T], adapter.validate_python(payload if payload is not None else []))
        except ValidationError as exc:
            raise DirectoryError(f"Unexpected Nomad payload for {path}: {exc}") from exc


if TYPE_CHECKING:
    _directory_check: ServiceDirectory = NomadDirectory(config=NomadConfig())
