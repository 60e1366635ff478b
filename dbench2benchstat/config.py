"""Runtime settings read from the environment and an optional ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from .formatters import DEFAULT_NAME_PREFIX

ENV_PREFIX = "DBENCH2BENCHSTAT_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    name_prefix: str = DEFAULT_NAME_PREFIX

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level} (expected one of {', '.join(LOG_LEVELS)})"
            )


def load_settings() -> Settings:
    """Build :class:`Settings` from ``DBENCH2BENCHSTAT_*`` variables."""
    load_dotenv()
    return Settings(
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
        name_prefix=os.getenv(f"{ENV_PREFIX}NAME_PREFIX", DEFAULT_NAME_PREFIX),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
