from __future__ import annotations

import pytest

_CONFIG_VARS = (
    "NOMAD_TAG",
    "DNS_DOMAIN",
    "ROS_ADDRESS",
    "ROS_USERNAME",
    "ROS_PASSWORD",
    "ROS_TIMEOUT_SECONDS",
    "NOMAD_ADDR",
    "NOMAD_TOKEN",
    "NOMAD_REGION",
    "NOMAD_SKIP_VERIFY",
    "NOMAD_CACERT",
    "ZONESYNC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's shell or ``.env`` from leaking into configuration tests."""
    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
