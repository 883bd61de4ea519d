from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

import pandas as pd

from app_core.config import MONTH_NAMES
from app_core.matrix.errors import EmptyDatasetError
from app_core.matrix.records import DailyRecord

logger = logging.getLogger(__name__)

MONTHS = tuple(range(1, 13))


@dataclass(frozen=True)
class MonthCell:
    year: int
    x_index: int
    y_index: int
    days: Tuple[DailyRecord, ...]
    month_max: Optional[float]
    month_min: Optional[float]

    @property
    def month(self) -> int:
        return self.y_index + 1

    @property
    def is_empty(self) -> bool:
        return not self.days


@dataclass(frozen=True)
class MatrixModel:
    years: Tuple[int, ...]
    cells: Tuple[MonthCell, ...]
    global_max: Optional[float]
    global_min: Optional[float]

    def cell(self, year: int, month: int) -> MonthCell:
        for c in self.cells:
            if c.year == year and c.month == month:
                return c
        raise KeyError((year, month))


def group_by_year_month(records: Iterable[DailyRecord]) -> Dict[int, Dict[int, list]]:
    """Two-level grouping year -> month -> records (input order kept)."""
    grouped: Dict[int, Dict[int, list]] = {}
    for r in records:
        grouped.setdefault(r.year, {}).setdefault(r.month, []).append(r)
    return grouped


def _sorted_unique_days(group: Sequence[DailyRecord]) -> Tuple[DailyRecord, ...]:
    # later duplicates of a day replace earlier ones
    by_day = {r.day: r for r in group}
    return tuple(by_day[d] for d in sorted(by_day))


def _max_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _min_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    present = [v for v in values if v is not None]
    return min(present) if present else None


def build_matrix(records: Iterable[DailyRecord], years: Sequence[int]) -> MatrixModel:
    """
    Build the dense year x month matrix.

    Every (year, month) in `years x 1..12` gets a MonthCell, empty months
    included. Records outside `years` are ignored. One of the global extrema
    is None when its column is blank across the whole window. Raises
    EmptyDatasetError only when neither column carries a temperature.
    """
    years = tuple(years)
    grouped = group_by_year_month(records)

    cells: list[MonthCell] = []
    global_max: Optional[float] = None
    global_min: Optional[float] = None

    for xi, y in enumerate(years):
        for m in MONTHS:
            days = _sorted_unique_days(grouped.get(y, {}).get(m, []))
            month_max = _max_or_none(d.max for d in days)
            month_min = _min_or_none(d.min for d in days)

            if month_max is not None:
                global_max = month_max if global_max is None else max(global_max, month_max)
            if month_min is not None:
                global_min = month_min if global_min is None else min(global_min, month_min)

            cells.append(
                MonthCell(
                    year=y,
                    x_index=xi,
                    y_index=m - 1,
                    days=days,
                    month_max=month_max,
                    month_min=month_min,
                )
            )

    if global_max is None and global_min is None:
        raise EmptyDatasetError("no temperature values in the selected year window")

    logger.debug(
        "Built matrix: %d years, %d cells, global range %s..%s",
        len(years), len(cells), global_min, global_max,
    )
    return MatrixModel(years=years, cells=tuple(cells), global_max=global_max, global_min=global_min)


def matrix_to_frame(model: MatrixModel) -> pd.DataFrame:
    """Tabular summary of the matrix, one row per cell (year, month order)."""
    rows = [
        {
            "year": c.year,
            "month": c.month,
            "month_name": MONTH_NAMES[c.y_index],
            "n_days": len(c.days),
            "month_max": c.month_max,
            "month_min": c.month_min,
        }
        for c in model.cells
    ]
    df = pd.DataFrame(rows, columns=["year", "month", "month_name", "n_days", "month_max", "month_min"])
    df[["month_max", "month_min"]] = df[["month_max", "month_min"]].astype(float)
    return df.sort_values(["year", "month"]).reset_index(drop=True)
