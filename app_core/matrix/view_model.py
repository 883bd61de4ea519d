from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from app_core.config import MONTH_NAMES
from app_core.matrix.aggregate import MatrixModel, MonthCell


class Mode(str, Enum):
    MAX = "MAX"
    MIN = "MIN"

    def flipped(self) -> "Mode":
        return Mode.MIN if self is Mode.MAX else Mode.MAX


@dataclass
class ViewState:
    mode: Mode = Mode.MAX


@dataclass(frozen=True)
class SparkPoint:
    day: int
    value: Optional[float]

    @property
    def is_gap(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class CellDescription:
    label: str
    mode: str
    value: Optional[float]


@dataclass
class MatrixViewModel:
    """
    Read-only matrix plus the one piece of mutable state (max/min mode).
    Per-cell values and sparklines are derived on every call; callers
    re-render after toggle_mode().
    """

    model: MatrixModel
    state: ViewState = field(default_factory=ViewState)

    def __post_init__(self):
        if self.state is None:
            self.state = ViewState()

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def current_value(self, cell: MonthCell) -> Optional[float]:
        return cell.month_max if self.state.mode is Mode.MAX else cell.month_min

    def sparkline_series(self, cell: MonthCell) -> Tuple[SparkPoint, ...]:
        use_max = self.state.mode is Mode.MAX
        return tuple(SparkPoint(d.day, d.max if use_max else d.min) for d in cell.days)

    def toggle_mode(self) -> None:
        self.state.mode = self.state.mode.flipped()

    def color_domain(self) -> Tuple[float, float]:
        """
        (high, low) of the shared colour/sparkline scale, high first.
        A blank column borrows its bound from the other column's cell
        values, so both modes keep a finite domain.
        """
        hi, lo = self.model.global_max, self.model.global_min
        if hi is None:
            hi = max(c.month_min for c in self.model.cells if c.month_min is not None)
        if lo is None:
            lo = min(c.month_max for c in self.model.cells if c.month_max is not None)
        return hi, lo

    def describe(self, cell: MonthCell) -> CellDescription:
        return CellDescription(
            label=f"{MONTH_NAMES[cell.y_index]} {cell.year}",
            mode=self.state.mode.value,
            value=self.current_value(cell),
        )

    def toggle_label(self) -> str:
        return f"Showing: {self.state.mode.value} (click to toggle)"
