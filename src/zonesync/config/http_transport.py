"""Configuration types for synchronous HTTP transports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(slots=True, frozen=True)
class BasicAuth:
    username: str
    password: str = field(default="", repr=False)


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Everything an adapter needs to open its HTTP client.

    ``verify`` is passed straight to httpx: ``False`` skips certificate checks,
    a string names a CA bundle.
    """

    name: str
    base_url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    verify: bool | str = True
    auth: BasicAuth | None = None
    default_headers: Mapping[str, str] | None = None
    default_params: Mapping[str, str] | None = None
