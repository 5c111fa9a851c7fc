"""
Settings for the tour, read from the environment, and logging setup
"""
from collections.abc import Mapping
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "PYAPPLICATIVE_"

LOGGER_NAME = "pyapplicative"


class TourSettings(BaseModel):
    """
    Options controlling how the tour runs and renders
    """
    model_config = ConfigDict(frozen=True)

    color: bool = True
    log_level: str = "WARNING"
    workers: int = Field(default=4, ge=1)
    fetch_delay_ms: int = Field(default=50, ge=0)
    sections: tuple[str, ...] = ()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("sections", mode="before")
    @classmethod
    def _split_sections(cls, value):
        if isinstance(value, str):
            return tuple(s.strip() for s in value.split(",") if s.strip())
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "TourSettings":
        """
        Builds settings from PYAPPLICATIVE_* variables,
        e.g. PYAPPLICATIVE_WORKERS=8 or PYAPPLICATIVE_SECTIONS=maybe,laws
        """
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls.model_validate(values)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Sets the level of the pyapplicative logger and gives it a
    single plain stream handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
