"""Smashcast API client package.

- **channel**: ``SmashcastChannel``, channel management (editors, hosters, views, stream keys, social posts)
- **logo**: ``Logo``, lazily downloaded media resources
- **live_media** / **emojis**: per-channel sub-resources handed out by ``SmashcastChannel``
- **client**: ``SmashcastClient``, the single-request HTTP layer and auth token holder
- **config**: ``SmashcastConfig`` and its YAML / environment loaders
"""

import logging

from .auth import AuthToken
from .channel import SmashcastChannel, ToggleResult
from .client import SmashcastClient, get_default_client, set_default_client
from .config import ConfigError, SmashcastConfig, config_from_env, load_config
from .errors import (
    InvalidArgumentError,
    InvalidOperationError,
    SmashcastApiError,
    SmashcastAuthError,
    SmashcastFetchError,
    SmashcastUsageError,
)
from .logo import Downloadable, Logo
from .version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "AuthToken",
    "ConfigError",
    "Downloadable",
    "InvalidArgumentError",
    "InvalidOperationError",
    "Logo",
    "SmashcastApiError",
    "SmashcastAuthError",
    "SmashcastChannel",
    "SmashcastClient",
    "SmashcastConfig",
    "SmashcastFetchError",
    "SmashcastUsageError",
    "ToggleResult",
    "config_from_env",
    "get_default_client",
    "load_config",
    "set_default_client",
]
