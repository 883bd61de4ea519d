from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from app_core.config import COLOR_SCALE, MONTH_NAMES, TEMPERATURE_UNIT
from app_core.matrix.aggregate import MonthCell
from app_core.matrix.view_model import MatrixViewModel

# fraction of a cell box the sparkline may use
SPARK_X_PAD = 0.45
SPARK_Y_PAD = 0.38
DAYS_DOMAIN = (1, 31)


def _fmt(value: Optional[float]) -> str:
    return "no data" if value is None else f"{value:.1f} {TEMPERATURE_UNIT}"


def hover_text(vm: MatrixViewModel, cell: MonthCell) -> str:
    d = vm.describe(cell)
    return f"<b>{d.label}</b><br>{d.mode}: {_fmt(d.value)}"


def sparkline_xy(vm: MatrixViewModel, cell: MonthCell) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """
    Sparkline points scaled into the cell box centred on (x_index, y_index).
    The y axis is reversed (January on top), so warmer values get smaller y.
    Gap days keep their x but carry y=None so the line breaks there.
    """
    hi, lo = vm.color_domain()
    d0, d1 = DAYS_DOMAIN
    span = hi - lo

    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for p in vm.sparkline_series(cell):
        xs.append(cell.x_index - SPARK_X_PAD + (p.day - d0) / (d1 - d0) * 2 * SPARK_X_PAD)
        if p.is_gap:
            ys.append(None)
            continue
        frac = (p.value - lo) / span if span > 0 else 0.5
        ys.append(cell.y_index + SPARK_Y_PAD - frac * 2 * SPARK_Y_PAD)
    return xs, ys


def value_grid(vm: MatrixViewModel) -> np.ndarray:
    """12 x n_years array of current values (NaN for empty months)."""
    z = np.full((12, len(vm.model.years)), np.nan)
    for c in vm.model.cells:
        v = vm.current_value(c)
        if v is not None:
            z[c.y_index, c.x_index] = v
    return z


def matrix_figure(vm: MatrixViewModel, *, title: Optional[str] = None, height: int = 720) -> go.Figure:
    years = vm.model.years
    hi, lo = vm.color_domain()

    text = [["" for _ in years] for _ in range(12)]
    for c in vm.model.cells:
        text[c.y_index][c.x_index] = hover_text(vm, c)

    fig = go.Figure()
    fig.add_trace(
        go.Heatmap(
            z=value_grid(vm),
            x=list(range(len(years))),
            y=list(range(12)),
            text=text,
            hovertemplate="%{text}<extra></extra>",
            colorscale=COLOR_SCALE,
            reversescale=True,  # high -> red
            zmin=lo,
            zmax=hi,
            xgap=4,
            ygap=4,
            colorbar=dict(title=f"Temperature ({TEMPERATURE_UNIT})"),
            name=vm.mode.value,
        )
    )

    # one trace for all sparklines; None separates cells
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    for c in vm.model.cells:
        if c.is_empty:
            continue
        cx, cy = sparkline_xy(vm, c)
        xs.extend(cx + [None])
        ys.extend(cy + [None])

    fig.add_trace(
        go.Scatter(
            x=xs,
            y=ys,
            mode="lines",
            line=dict(color="#333", width=1.2),
            connectgaps=False,
            hoverinfo="skip",
            showlegend=False,
            name="daily",
        )
    )

    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=60, b=10),
        title=title or f"Monthly Matrix View — {vm.toggle_label()}",
        plot_bgcolor="white",
    )
    fig.update_xaxes(
        tickmode="array",
        tickvals=list(range(len(years))),
        ticktext=[str(y) for y in years],
        side="top",
        showgrid=False,
        zeroline=False,
    )
    fig.update_yaxes(
        tickmode="array",
        tickvals=list(range(12)),
        ticktext=list(MONTH_NAMES),
        autorange="reversed",
        showgrid=False,
        zeroline=False,
    )
    return fig
