"""Application configuration helpers."""

from __future__ import annotations

from .env import env_bool, env_float, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_transport import DEFAULT_TIMEOUT_SECONDS, BasicAuth, TransportConfig
from .logging import configure_logging
from .nomad import NOMAD_DEFAULT_ADDRESS, NomadConfig, get_nomad_config
from .routeros import RouterOSConfig, get_routeros_config
from .sync import SyncConfig, get_sync_config

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "NOMAD_DEFAULT_ADDRESS",
    "BasicAuth",
    "ConfigurationError",
    "MissingConfigurationError",
    "NomadConfig",
    "RouterOSConfig",
    "SyncConfig",
    "TransportConfig",
    "configure_logging",
    "env_bool",
    "env_float",
    "get_nomad_config",
    "get_routeros_config",
    "get_sync_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
