"""Environment-driven settings for the classifier."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    pass


class EngineSettings(BaseModel):
    suffix_list_path: Optional[Path] = None
    log_level: str = "WARNING"

    @field_validator("suffix_list_path")
    @classmethod
    def path_must_exist(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and not value.is_file():
            raise ValueError(f"suffix list file does not exist: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(dotenv_path: Path | None = None) -> EngineSettings:
    """Read settings from the environment, after loading an optional ``.env`` file."""
    load_dotenv(dotenv_path, override=False)
    values = {}
    path = os.getenv("SUFFIX_LIST_PATH", "").strip()
    if path:
        values["suffix_list_path"] = Path(path)
    level = os.getenv("SUFFIX_LOG_LEVEL", "").strip()
    if level:
        values["log_level"] = level
    try:
        return EngineSettings(**values)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
