"""Public interface for the Nomad directory adapter."""

from __future__ import annotations

from .client import NomadDirectory
from .schema import NamespacePayload, NamespaceServices, ServiceRegistration, ServiceStub
from .translator import add_registrations, is_selected

__all__ = [
    "NamespacePayload",
    "NamespaceServices",
    "NomadDirectory",
    "ServiceRegistration",
    "ServiceStub",
    "add_registrations",
    "is_selected",
]
