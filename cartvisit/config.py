"""Runtime settings read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import Err, Ok, Result
from .money import DEFAULT_CURRENCY

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    currency: str = DEFAULT_CURRENCY
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls) -> Result[Settings, ValueError]:
        """Build settings from CARTVISIT_CURRENCY and CARTVISIT_LOG_LEVEL."""
        load_dotenv()
        currency = os.getenv("CARTVISIT_CURRENCY", DEFAULT_CURRENCY)
        level = os.getenv("CARTVISIT_LOG_LEVEL", "WARNING").strip().upper()

        match level:
            case str(name) if name in _LEVELS:
                return Ok(cls(currency=currency, log_level=name))
            case _:
                return Err(
                    ValueError(f"CARTVISIT_LOG_LEVEL must be one of {', '.join(_LEVELS)}, got {level!r}")
                )
