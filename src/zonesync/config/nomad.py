"""Nomad directory configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_bool, optional_env_var
from .http_transport import DEFAULT_TIMEOUT_SECONDS, TransportConfig

NOMAD_DEFAULT_ADDRESS = "http://127.0.0.1:4646"


@dataclass(frozen=True)
class NomadConfig:
    """Connection settings for the Nomad HTTP API."""

    address: str = NOMAD_DEFAULT_ADDRESS
    token: str | None = field(default=None, repr=False)
    region: str | None = None
    skip_verify: bool = False
    ca_cert: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def transport(self) -> TransportConfig:
        verify: bool | str = True
        if self.skip_verify:
            verify = False
        elif self.ca_cert:
            verify = self.ca_cert

        headers = {"X-Nomad-Token": self.token} if self.token else None
        params = {"region": self.region} if self.region else None
        return TransportConfig(
            name="nomad",
            base_url=self.address.rstrip("/"),
            timeout_seconds=self.timeout_seconds,
            verify=verify,
            default_headers=headers,
            default_params=params,
        )


def get_nomad_config() -> NomadConfig:
    """Read the conventional ``NOMAD_*`` variables; every one of them is optional."""

    return NomadConfig(
        address=optional_env_var("NOMAD_ADDR", NOMAD_DEFAULT_ADDRESS) or NOMAD_DEFAULT_ADDRESS,
        token=optional_env_var("NOMAD_TOKEN"),
        region=optional_env_var("NOMAD_REGION"),
        skip_verify=env_bool("NOMAD_SKIP_VERIFY"),
        ca_cert=optional_env_var("NOMAD_CACERT"),
    )
