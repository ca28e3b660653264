"""HTTP client for the RouterOS REST static DNS table."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from zonesync.adapters.http_transport import TransportClient
from zonesync.config.routeros import RouterOSConfig
from zonesync.domain.errors import ZoneRejectedError, ZoneResponseError, ZoneTransportError
from zonesync.domain.ports import ZoneStore

from .schema import StaticRecordList, StaticRecordPayload

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from zonesync.config.http_transport import TransportConfig
    from zonesync.domain.ports import RecordField
    from zonesync.domain.types import ManagedRecord

log = getLogger(__name__)

STATIC_DNS_PATH = "/rest/ip/dns/static"


def _default_client_factory(config: TransportConfig) -> TransportClient:
    return TransportClient(config)


@dataclass(slots=True)
class RouterOSZone:
    """Zone store backed by a RouterOS router's static DNS entries."""

    config: RouterOSConfig
    client_factory: Callable[[TransportConfig], TransportClient] = field(
        default=_default_client_factory
    )
    _client: TransportClient | None = field(default=None, init=False, repr=False)

    def __enter__(self) -> RouterOSZone:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def client(self) -> TransportClient:
        if self._client is None:
            self._client = self.client_factory(self.config.transport())
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def list_by_field(self, field: RecordField, value: str) -> list[ManagedRecord]:
        """Return every entry whose ``field`` equals ``value``.

        A rejected query yields no records instead of an error; only transport
        failures and unreadable bodies raise.
        """

        response = self._send("GET", STATIC_DNS_PATH, params={field: value})
        if not response.is_success:
            log.warning(
                "RouterOS query %s=%r returned HTTP %s: %s",
                field,
                value,
                response.status_code,
                response.text.strip(),
            )
            return []

        try:
            payloads = StaticRecordList.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise ZoneResponseError(f"Unexpected RouterOS listing for {field}={value!r}") from exc
        return [payload.to_record() for payload in payloads]

    def create(self, record: ManagedRecord) -> ManagedRecord:
        body = StaticRecordPayload.from_record(record).create_body()
        response = self._send("PUT", STATIC_DNS_PATH, json=body)
        if response.status_code != httpx.codes.CREATED:
            log.error("RouterOS refused %s: %s", record.name, response.text.strip())
            raise ZoneRejectedError(
                f"Error creating record {record.name}",
                record_name=record.name,
                status_code=response.status_code,
            )

        try:
            created = StaticRecordPayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ZoneResponseError(f"Unexpected RouterOS reply creating {record.name}") from exc
        if not created.id:
            raise ZoneResponseError(f"RouterOS did not assign an id to {record.name}")
        return record.with_id(created.id)

    def delete(self, record: ManagedRecord) -> None:
        if not record.id:
            raise ValueError(f"Cannot delete {record.name} without a record id")

        response = self._send("DELETE", f"{STATIC_DNS_PATH}/{record.id}")
        if not response.is_success:
            raise ZoneRejectedError(
                f"Error deleting record {record.id} ({record.name}): HTTP {response.status_code}",
                record_name=record.name,
                status_code=response.status_code,
            )

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: object = None,
    ) -> httpx.Response:
        try:
            return self.client.request(method, path, params=params, json=json)
        except httpx.TransportError as exc:
            raise ZoneTransportError(f"RouterOS {method} {path} failed: {exc}") from exc


if TYPE_CHECKING:
    _store_check: ZoneStore = RouterOSZone(
        config=RouterOSConfig(address="router", username="admin")
    )
