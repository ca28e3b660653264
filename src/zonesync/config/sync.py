"""Settings for one reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars


@dataclass(frozen=True, slots=True)
class SyncConfig:
    tag: str
    domain: str


def get_sync_config() -> SyncConfig:
    values = require_env_vars(("NOMAD_TAG", "DNS_DOMAIN"))
    return SyncConfig(
        tag=values["NOMAD_TAG"].strip(),
        domain=values["DNS_DOMAIN"].strip().strip("."),
    )
