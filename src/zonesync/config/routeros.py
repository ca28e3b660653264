"""RouterOS zone-store configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .env import env_float, require_env_vars
from .http_transport import DEFAULT_TIMEOUT_SECONDS, BasicAuth, TransportConfig


@dataclass(frozen=True)
class RouterOSConfig:
    """Holds the RouterOS REST endpoint and credentials."""

    address: str
    username: str
    password: str = field(default="", repr=False)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def transport(self) -> TransportConfig:
        # RouterOS ships a self-signed certificate by default.
        return TransportConfig(
            name="routeros",
            base_url=f"https://{self.address}",
            timeout_seconds=self.timeout_seconds,
            verify=False,
            auth=BasicAuth(self.username, self.password),
        )


def get_routeros_config() -> RouterOSConfig:
    values = require_env_vars(("ROS_ADDRESS", "ROS_USERNAME"))
    return RouterOSConfig(
        address=values["ROS_ADDRESS"].strip(),
        username=values["ROS_USERNAME"],
        password=os.getenv("ROS_PASSWORD", ""),
        timeout_seconds=env_float("ROS_TIMEOUT_SECONDS", default=DEFAULT_TIMEOUT_SECONDS),
    )
