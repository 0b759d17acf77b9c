"""
Configuration loader.

The library never reads the environment on its own: `AreaCodeKit()` without
settings uses code defaults. Applications that want file or environment driven
configuration call `load_settings()` explicitly.

Precedence (highest to lowest):
1. OS environment variables (`AREACODEKIT_*`)
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic import ConfigDict as PydanticConfigDict

from areacodekit.query import DEFAULT_SUGGESTION_LIMIT


class AreaCodeSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    # Data
    data_dir: Path | None = None
    parallel_loading: bool = True

    # Queries
    suggestion_limit: int = Field(default=DEFAULT_SUGGESTION_LIMIT, ge=0)

    # Logging
    log_level: str = "INFO"
    json_logging: bool = False


_ENV_MAP: dict[str, str] = {
    "AREACODEKIT_DATA_DIR": "data_dir",
    "AREACODEKIT_PARALLEL_LOADING": "parallel_loading",
    "AREACODEKIT_SUGGESTION_LIMIT": "suggestion_limit",
    "AREACODEKIT_LOG_LEVEL": "log_level",
    "AREACODEKIT_JSON_LOGGING": "json_logging",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values parses the file without touching os.environ.
    values = dotenv_values(path)
    return {k: v for k, v in values.items() if isinstance(k, str) and isinstance(v, str)}


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key in env:
            target[field_name] = env[env_key]


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> AreaCodeSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path. Falls back to `AREACODEKIT_CONFIG`
            from the OS environment or the .env file.
        env_path: Optional .env path (default: `.env` if present).
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    if yaml_path is None:
        cfg = os.environ.get("AREACODEKIT_CONFIG") or dotenv.get("AREACODEKIT_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return AreaCodeSettings.model_validate(data)
