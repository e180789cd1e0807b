from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .utils import env_str, load_yaml_file, validate_url

DEFAULT_API_URL = "https://api.smashcast.tv/"
DEFAULT_IMAGE_URL = "https://edge.sf.hitbox.tv"
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "smashcast-python"


class ConfigError(ValueError):
    """Raised when client configuration is invalid."""


@dataclass
class SmashcastConfig:
    """Connection settings for the Smashcast REST API and media host."""

    api_url: str = DEFAULT_API_URL
    image_url: str = DEFAULT_IMAGE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    auth_token: str | None = None


def _clean_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_timeout(value: Any, *, field_name: str) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{field_name}' must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"'{field_name}' must be positive, got {timeout}")
    return timeout


def _build_config(data: dict[str, Any]) -> SmashcastConfig:
    defaults = SmashcastConfig()

    api_url = _clean_str(data.get("api_url")) or defaults.api_url
    if not validate_url(api_url):
        raise ConfigError(f"Invalid 'api_url': {api_url}")

    image_url = _clean_str(data.get("image_url")) or defaults.image_url
    if not validate_url(image_url):
        raise ConfigError(f"Invalid 'image_url': {image_url}")

    timeout = defaults.timeout
    if data.get("timeout") is not None:
        timeout = _parse_timeout(data["timeout"], field_name="timeout")

    return SmashcastConfig(
        api_url=api_url,
        image_url=image_url,
        timeout=timeout,
        user_agent=_clean_str(data.get("user_agent")) or defaults.user_agent,
        auth_token=_clean_str(data.get("auth_token")),
    )


def load_config(path: Path) -> SmashcastConfig:
    """Load client settings from a YAML file.

    Settings may live at the top level or under a ``smashcast:`` key.
    String values go through ``$VAR`` environment expansion.
    """
    raw = load_yaml_file(path)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    section = raw.get("smashcast", raw)
    if not isinstance(section, dict):
        raise ConfigError("'smashcast' section must be a mapping")
    return _build_config(section)


def config_from_env() -> SmashcastConfig:
    """Build client settings from ``SMASHCAST_*`` environment variables."""
    return _build_config(
        {
            "api_url": env_str("SMASHCAST_API_URL"),
            "image_url": env_str("SMASHCAST_IMAGE_URL"),
            "timeout": env_str("SMASHCAST_TIMEOUT"),
            "auth_token": env_str("SMASHCAST_AUTH_TOKEN"),
        }
    )
