"""Environment configuration for the benchreg CLI and embedding apps.

The kernel never reads the environment; only callers that want env-driven
defaults go through Settings.from_env().
"""

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from benchreg.errors import ConfigError


ENV_PREFIX = "BENCHREG_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Validated settings. Unset variables take the defaults below."""
    env: Literal["development", "test", "production"] = "development"
    latest_version: Optional[str] = None
    log_level: str = "WARNING"
    unknown_fields: Literal["ignore", "reject"] = "ignore"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(_LOG_LEVELS)}, got '{v}'")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from BENCHREG_* variables.

        Empty strings count as unset, so BENCHREG_ENV= keeps the default.

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if environ is None:
            environ = os.environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            values[name] = raw
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid benchreg environment configuration: {e}") from e


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """Configure the root logger for command-line use."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
