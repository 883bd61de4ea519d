from __future__ import annotations

from typing import Sequence, Tuple

from app_core.config import DEFAULT_WINDOW_YEARS
from app_core.matrix.errors import EmptyDatasetError
from app_core.matrix.records import DailyRecord


def year_window(records: Sequence[DailyRecord], n: int = DEFAULT_WINDOW_YEARS) -> Tuple[int, ...]:
    """
    The n most recent years ending at the latest year in the data.
    Derived as a numeric range, so years without records are still included.
    """
    if n < 1:
        raise ValueError("window size must be >= 1")
    if not records:
        raise EmptyDatasetError("no records to select a year window from")
    max_year = max(r.year for r in records)
    return tuple(range(max_year - n + 1, max_year + 1))


def select_year_window(
    records: Sequence[DailyRecord],
    n: int = DEFAULT_WINDOW_YEARS,
) -> Tuple[Tuple[int, ...], Tuple[DailyRecord, ...]]:
    """Return (years, records inside the window) keeping source order."""
    years = year_window(records, n)
    lo, hi = years[0], years[-1]
    return years, tuple(r for r in records if lo <= r.year <= hi)
