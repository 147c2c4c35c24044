from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class EngineSettings(BaseModel):
    log_level: str = "WARNING"
    # Log every visited node at DEBUG level on the evaluator logger.
    trace: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"COMPOSABLE_RULES_LOG_LEVEL must be a logging level name, got {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """
    Load engine settings from environment variables (and a local ``.env``).

    Reads:
      COMPOSABLE_RULES_LOG_LEVEL, COMPOSABLE_RULES_TRACE
    """
    return EngineSettings(
        log_level=os.getenv("COMPOSABLE_RULES_LOG_LEVEL", "WARNING"),
        trace=_parse_flag("COMPOSABLE_RULES_TRACE"),
    )


@lru_cache(maxsize=1)
def trace_enabled() -> bool:
    """Read only COMPOSABLE_RULES_TRACE, independent of the other settings."""
    return _parse_flag("COMPOSABLE_RULES_TRACE")


def _parse_flag(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY)}, got {raw!r}")
