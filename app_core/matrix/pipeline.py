from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from app_core.config import DEFAULT_WINDOW_YEARS
from app_core.matrix.aggregate import build_matrix
from app_core.matrix.errors import EmptyDatasetError
from app_core.matrix.records import NormalizeResult, normalize_rows, records_from_frame
from app_core.matrix.view_model import MatrixViewModel, ViewState
from app_core.matrix.window import select_year_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    view_model: MatrixViewModel
    n_rows: int
    n_dropped: int


def build_view_model(
    rows: Iterable[Mapping[str, Any]] | pd.DataFrame,
    window_years: int = DEFAULT_WINDOW_YEARS,
    state: Optional[ViewState] = None,
) -> MatrixViewModel:
    """Raw rows -> normalized records -> year window -> matrix -> view model."""
    return run_pipeline(rows, window_years=window_years, state=state).view_model


def run_pipeline(
    rows: Iterable[Mapping[str, Any]] | pd.DataFrame,
    window_years: int = DEFAULT_WINDOW_YEARS,
    state: Optional[ViewState] = None,
) -> PipelineResult:
    """
    Same as build_view_model but also reports row counts.
    Nothing is returned unless every stage succeeds; EmptyDatasetError
    propagates to the caller.
    """
    if isinstance(rows, pd.DataFrame):
        norm = records_from_frame(rows)
        n_rows = len(rows)
    else:
        rows = list(rows)
        norm = normalize_rows(rows)
        n_rows = len(rows)

    if not norm.records:
        raise EmptyDatasetError(f"no valid records among {n_rows} rows")

    years, in_window = select_year_window(norm.records, window_years)
    model = build_matrix(in_window, years)
    vm = MatrixViewModel(model, state)

    _log_summary(norm, n_rows, years)
    return PipelineResult(view_model=vm, n_rows=n_rows, n_dropped=norm.n_dropped)


def _log_summary(norm: NormalizeResult, n_rows: int, years) -> None:
    logger.info(
        "Matrix ready: %d rows read, %d dropped, window %d-%d",
        n_rows, norm.n_dropped, years[0], years[-1],
    )
