"""Runtime configuration for the command-line shell."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

ENV_LOG_LEVEL = "KV_CORE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(value: str) -> str:
    """Normalise a level name; unknown names fall back to the default."""
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


@dataclass
class Config:
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        return cls(log_level=_log_level(env.get(ENV_LOG_LEVEL, "")))
