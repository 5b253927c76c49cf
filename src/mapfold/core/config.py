import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        # Any name registered with logging is accepted, aliases such as WARN included
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL '{value}' is not a known logging level.")
        return level

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from environment variables.

        ``MAPFOLD_LOG_LEVEL`` wins over the generic ``LOG_LEVEL``.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("MAPFOLD_LOG_LEVEL") or environ.get("LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get("MAPFOLD_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
