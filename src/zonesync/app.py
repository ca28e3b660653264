"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import ExitStack
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from zonesync.adapters.nomad import NomadDirectory
from zonesync.adapters.routeros import RouterOSZone
from zonesync.config import get_routeros_config, get_sync_config
from zonesync.domain.reconciliation import ReconcileResult, ZoneReconciler

if TYPE_CHECKING:
    from collections.abc import Callable

    from zonesync.config import SyncConfig
    from zonesync.domain.ports import ServiceDirectory, ZoneStore

log = getLogger(__name__)


class SyncStage(StrEnum):
    CONFIGURE = "loading configuration"
    DIRECTORY_INIT = "initializing directory client"
    LIST_SERVICES = "listing services"
    ZONE_INIT = "initializing zone client"
    RECONCILE = "updating DNS"


class SyncError(RuntimeError):
    """A pass failed; ``stage`` says where and ``__cause__`` holds the original error."""

    def __init__(self, stage: SyncStage, cause: BaseException) -> None:
        super().__init__(f"Error {stage}: {cause}")
        self.stage = stage


def _default_zone(sync_config: SyncConfig) -> RouterOSZone:
    del sync_config
    return RouterOSZone(config=get_routeros_config())


def sync_dns(
    *,
    sync_config: SyncConfig | None = None,
    directory_factory: Callable[[], ServiceDirectory] = NomadDirectory,
    zone_factory: Callable[[SyncConfig], ZoneStore] = _default_zone,
) -> ReconcileResult:
    """Run one pass: read the directory, then converge the zone onto it.

    Nothing in the zone is touched unless the directory listing completed.
    """

    stage = SyncStage.CONFIGURE
    try:
        effective_config = sync_config or get_sync_config()

        stage = SyncStage.DIRECTORY_INIT
        directory = directory_factory()

        stage = SyncStage.LIST_SERVICES
        desired = directory.list_services(effective_config.tag)

        with ExitStack() as stack:
            stage = SyncStage.ZONE_INIT
            zone = zone_factory(effective_config)
            if isinstance(zone, RouterOSZone):
                stack.enter_context(zone)

            stage = SyncStage.RECONCILE
            log.info(
                "Starting DNS sync: tag=%r, domain=%s, services=%s",
                effective_config.tag,
                effective_config.domain,
                len(desired),
            )
            reconciler = ZoneReconciler(zone=zone, domain=effective_config.domain)
            return reconciler.reconcile(effective_config.tag, desired)
    except Exception as exc:
        raise SyncError(stage, exc) from exc
