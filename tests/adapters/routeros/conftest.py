"""Shared fixtures for RouterOS adapter tests."""

from __future__ import annotations

import pytest

from zonesync.config import RouterOSConfig


@pytest.fixture
def routeros_config() -> RouterOSConfig:
    return RouterOSConfig(address="router.test", username="api", password="hunter2")  # noqa: S106
