"""
Configuration Management.

Loads settings from config/settings/*.yaml and optional overrides from
TODONOTES_* environment variables.

Settings (YAML):
    notes.yaml    - Confirmation message, id strategy, default prompt
    logging.yaml  - Logging configuration

Environment overrides:
    TODONOTES_LOG_LEVEL, TODONOTES_LOG_FORMAT
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from todonotes.core.config_schema import LoggingSchema, NotesSchema


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class EnvOverrides(BaseSettings):
    """Optional overrides read from TODONOTES_* environment variables."""

    log_level: str | None = None
    log_format: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="TODONOTES_",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._notes = _load_validated(NotesSchema, "notes.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def notes(self) -> NotesSchema:
        """Note store settings."""
        return self._notes

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_env_overrides() -> EnvOverrides:
    """Get cached environment overrides."""
    return EnvOverrides()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()
