"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``DocRepoConfig``
instance.  Existing dict-based access continues to work unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class RepositoryConfigModel(BaseModel):
    """Repository behaviour knobs."""

    missing_fields: str = "raise"

    @field_validator("missing_fields", mode="before")
    @classmethod
    def _known_policy(cls, v: Any) -> Any:
        # Local import: repository.config imports core.exceptions only
        from docrepo.repository.config import MissingFieldPolicy

        value = str(v).strip().lower()
        allowed = [p.value for p in MissingFieldPolicy]
        if value not in allowed:
            raise ValueError(f"missing_fields must be one of {allowed}, got {v!r}")
        return value


class LoggingConfig(BaseModel):
    """Loguru sink settings."""

    level: str = "WARNING"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        value = str(v).strip().upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {list(_LOG_LEVELS)}, got {v!r}")
        return value

    @field_validator("file", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str | Path) and str(v):
            return Path(v).expanduser()
        return None


class DocRepoConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    repository: RepositoryConfigModel = RepositoryConfigModel()
    logging: LoggingConfig = LoggingConfig()
