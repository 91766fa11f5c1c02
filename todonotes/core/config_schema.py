"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at load time instead of a cryptic KeyError deep in the store.

Each top-level class corresponds to one file in config/settings/:
    NotesSchema    → notes.yaml
    LoggingSchema  → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# notes.yaml
# =============================================================================


class NotesSchema(_StrictBase):
    confirmation_message: str = Field(min_length=1)
    id_strategy: Literal["uuid", "counter"]
    id_prefix: str
    prompt: Literal["console", "always", "never"]


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: Literal["json", "console"]
    handlers: HandlersSchema
