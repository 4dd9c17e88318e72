"""
Runtime configuration.

Settings come from three layers, later ones winning: the dataclass
defaults, an optional YAML file (same shape as the field names) and
environment variables, which may be supplied through a `.env` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Dict, Optional

import yaml  # type: ignore
from dotenv import dotenv_values

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"

# environment variable -> settings field
ENV_VARS = {
    "PALLETFLOW_UPSTREAM_URL": "upstream_base_url",
    "PALLETFLOW_TIMEOUT": "timeout_seconds",
    "PALLETFLOW_USER_AGENT": "user_agent",
    "PALLETFLOW_STATIC_DIR": "static_dir",
    "HOST": "host",
    "PORT": "port",
}


@dataclass(frozen=True)
class Settings:
    """Configuration for fetching listings and serving the API."""

    upstream_base_url: str = "https://www.liquidation.com"
    timeout_seconds: float = 5.0
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    host: str = "127.0.0.1"
    port: int = 4000
    static_dir: str = "dist"

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}


def _coerce(name: str, value: object, source: str) -> object:
    try:
        if name == "timeout_seconds":
            return float(value)  # type: ignore[arg-type]
        if name == "port":
            return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value {value!r} for {name} in {source}") from exc
    return str(value)


def _load_yaml(config_path: str) -> Dict[str, object]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not read config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping of settings")
    return data


def load_settings(
    config_path: Optional[str] = None,
    *,
    use_env: bool = True,
    env_file: str = ".env",
) -> Settings:
    """Build `Settings` from defaults, an optional YAML file and the environment.

    Args:
        config_path: Optional YAML file whose top-level keys are field
            names of `Settings`.  Unknown keys are ignored with a warning.
        use_env: Read `env_file` and the process environment.  Process
            variables win over the file; `os.environ` is not modified.
        env_file: Path of the dotenv file, relative to the working directory.

    Returns:
        The merged settings.

    Raises:
        ConfigError: The YAML file is unreadable or not a mapping, or a
            numeric setting does not parse.
    """
    known = {f.name for f in fields(Settings)}
    overrides: Dict[str, object] = {}
    if config_path:
        for key, value in _load_yaml(config_path).items():
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, config_path)
                continue
            overrides[key] = _coerce(key, value, config_path)
    if use_env:
        environ = {**dotenv_values(env_file), **os.environ}
        for env_name, field_name in ENV_VARS.items():
            value = environ.get(env_name)
            if value:
                overrides[field_name] = _coerce(field_name, value, env_name)
    settings = replace(Settings(), **overrides)
    logger.debug("Loaded settings: %s", settings)
    return settings
