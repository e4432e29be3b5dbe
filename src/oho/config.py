"""CLI settings — where the OpenCode Server lives and how to log in.

Resolution order, lowest to highest:

1. built-in defaults;
2. ``~/.config/oho/config.json`` when it exists, otherwise the
   ``OPENCODE_SERVER_*`` environment variables;
3. command-line flags (applied by the CLI through :meth:`Settings.merged`).
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

ENV_HOST = "OPENCODE_SERVER_HOST"
ENV_PORT = "OPENCODE_SERVER_PORT"
ENV_USERNAME = "OPENCODE_SERVER_USERNAME"
ENV_PASSWORD = "OPENCODE_SERVER_PASSWORD"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the config file cannot be read or validated."""


class Settings(BaseModel):
    """Connection settings for the OpenCode Server."""

    host: str = "127.0.0.1"
    port: int = 4096
    username: str = "opencode"
    password: str = ""
    json_output: bool = False

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def merged(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=changes)


def default_config_path() -> Path:
    return Path.home() / ".config" / "oho" / "config.json"


def load_settings(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Build :class:`Settings` from the config file or the environment.

    Raises:
        ConfigError: The config file exists but is not valid JSON settings.
    """
    config_path = path or default_config_path()
    environ = os.environ if env is None else env

    if config_path.is_file():
        return _load_file(config_path)
    return _from_env(environ)


def _load_file(path: Path) -> Settings:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    # The file stores the output flag under "json".
    if "json" in raw:
        raw["json_output"] = raw.pop("json")

    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _from_env(environ: Mapping[str, str]) -> Settings:
    settings = Settings()
    updates: dict[str, Any] = {}
    if environ.get(ENV_HOST):
        updates["host"] = environ[ENV_HOST]
    if environ.get(ENV_PORT):
        try:
            updates["port"] = int(environ[ENV_PORT])
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", ENV_PORT, environ[ENV_PORT])
    if environ.get(ENV_USERNAME):
        updates["username"] = environ[ENV_USERNAME]
    if environ.get(ENV_PASSWORD):
        updates["password"] = environ[ENV_PASSWORD]
    return settings.model_copy(update=updates)
