"""
config.py
Constants and environment-driven settings for the temperature matrix app.

Environment variables (all optional):
    TEMPERATURE_CSV_SOURCE  URL or local path of the daily temperature CSV
    MATRIX_WINDOW_YEARS     number of most recent years to show (default 10)
    LOG_LEVEL               logging level name (default INFO)
"""
from __future__ import annotations

import calendar
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CSV_URL = (
    "https://raw.githubusercontent.com/salomonkoivisto/CSCE-679/main/Assignment1/temperature_daily.csv"
)
DEFAULT_WINDOW_YEARS = 10
MONTH_NAMES = tuple(calendar.month_name[i] for i in range(1, 13))

# Red (hot) -> Yellow -> Blue (cold)
COLOR_SCALE = "RdYlBu"
TEMPERATURE_UNIT = "°C"


@dataclass(frozen=True)
class Settings:
    csv_source: str = DEFAULT_CSV_URL
    window_years: int = DEFAULT_WINDOW_YEARS
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        source = (env.get("TEMPERATURE_CSV_SOURCE") or "").strip() or DEFAULT_CSV_URL

        raw_years = (env.get("MATRIX_WINDOW_YEARS") or "").strip()
        try:
            years = int(raw_years) if raw_years else DEFAULT_WINDOW_YEARS
        except ValueError as exc:
            raise ValueError(f"MATRIX_WINDOW_YEARS must be an integer, got {raw_years!r}") from exc
        if years < 1:
            raise ValueError("MATRIX_WINDOW_YEARS must be >= 1")

        level_name = (env.get("LOG_LEVEL") or "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"unknown LOG_LEVEL {level_name!r}")

        return cls(csv_source=source, window_years=years, log_level=level)
