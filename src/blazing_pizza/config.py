from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(Exception):
    """Raised at startup when an environment setting is unusable."""


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    currency_symbol: str = "$"
    menu_file: Path | None = None

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    log_level = env.get("PIZZA_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(f"PIZZA_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")

    menu_file: Path | None = None
    raw_menu = env.get("PIZZA_MENU_FILE", "").strip()
    if raw_menu:
        menu_file = Path(raw_menu)
        if not menu_file.is_file():
            raise ConfigurationError(f"PIZZA_MENU_FILE not found: {menu_file}")

    return Settings(
        log_level=log_level,
        currency_symbol=env.get("PIZZA_CURRENCY_SYMBOL", "$"),
        menu_file=menu_file,
    )
