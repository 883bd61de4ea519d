from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from app_core.matrix.errors import ParseError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DATE_COL = "date"
MAX_COL = "max_temperature"
MIN_COL = "min_temperature"


@dataclass(frozen=True)
class DailyRecord:
    date: date
    year: int
    month: int
    day: int
    max: Optional[float]
    min: Optional[float]

    def __post_init__(self):
        if (self.date.year, self.date.month, self.date.day) != (self.year, self.month, self.day):
            raise ValueError(f"date {self.date} does not match {self.year}-{self.month}-{self.day}")


@dataclass(frozen=True)
class NormalizeResult:
    records: tuple[DailyRecord, ...]
    dropped_rows: tuple[int, ...] = field(default_factory=tuple)

    @property
    def n_dropped(self) -> int:
        return len(self.dropped_rows)


def parse_date(value: Any) -> date:
    """Parse a strict YYYY-MM-DD string (raises ParseError)."""
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ParseError(f"date {value!r} does not match YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise ParseError(f"invalid calendar date {value!r}") from exc


def parse_temperature(value: Any) -> Optional[float]:
    """
    Parse one temperature field.
    Missing, empty or NaN -> None; anything else must be a finite number.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        t = float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"temperature {value!r} is not numeric") from exc
    if math.isnan(t):
        return None
    if not math.isfinite(t):
        raise ParseError(f"temperature {value!r} is not finite")
    return t


def normalize_row(row: Mapping[str, Any]) -> DailyRecord:
    d = parse_date(row.get(DATE_COL))
    return DailyRecord(
        date=d,
        year=d.year,
        month=d.month,
        day=d.day,
        max=parse_temperature(row.get(MAX_COL)),
        min=parse_temperature(row.get(MIN_COL)),
    )


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> NormalizeResult:
    """
    Normalize rows in source order. Rows failing to parse are dropped,
    logged, and their positions kept in `dropped_rows`.
    """
    records: list[DailyRecord] = []
    dropped: list[int] = []
    for i, row in enumerate(rows):
        try:
            records.append(normalize_row(row))
        except ParseError as exc:
            logger.warning("Dropping row %d: %s", i, exc)
            dropped.append(i)
    return NormalizeResult(records=tuple(records), dropped_rows=tuple(dropped))


def records_from_frame(df: pd.DataFrame) -> NormalizeResult:
    if df is None or df.empty:
        return NormalizeResult(records=())
    cols = [c for c in (DATE_COL, MAX_COL, MIN_COL) if c in df.columns]
    return normalize_rows(df[cols].to_dict(orient="records"))
