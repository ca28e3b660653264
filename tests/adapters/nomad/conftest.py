"""Shared fixtures for Nomad adapter tests."""

from __future__ import annotations

import pytest

from tests.support.nomad import FakeNomadAPI, registration
from zonesync.config import NomadConfig


@pytest.fixture
def nomad_config() -> NomadConfig:
    return NomadConfig(address="http://nomad.test:4646", token="secret-token")  # noqa: S106


@pytest.fixture
def nomad_api() -> FakeNomadAPI:
    return FakeNomadAPI(
        namespaces=["default", "infra"],
        services={
            "default": [("web", ["dns", "http"]), ("batch", ["internal"]), ("api", None)],
            "infra": [("web", ["dns"]), ("ldap", ["dns"])],
        },
        registrations={
            ("default", "web"): [registration("web", "10.0.0.1"), registration("web", "10.0.0.2")],
            ("default", "batch"): [registration("batch", "10.0.9.1")],
            ("default", "api"): [registration("api", "10.0.1.1")],
            ("infra", "web"): [registration("web", "10.1.0.1", namespace="infra")],
            ("infra", "ldap"): [registration("ldap", "10.1.0.5", namespace="infra")],
        },
    )
