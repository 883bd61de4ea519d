import numpy as np
import pytest

from app_core.charts.matrix_chart import hover_text, matrix_figure, sparkline_xy, value_grid
from app_core.matrix.pipeline import build_view_model

ROWS = [
    {"date": "2022-01-01", "max_temperature": "10", "min_temperature": "0"},
    {"date": "2022-01-31", "max_temperature": "30", "min_temperature": ""},
    {"date": "2022-01-15", "max_temperature": "", "min_temperature": "5"},
    {"date": "2023-07-10", "max_temperature": "20", "min_temperature": "15"},
]


@pytest.fixture
def vm():
    return build_view_model(ROWS, window_years=2)


def test_value_grid_shape_and_nan_for_empty(vm):
    z = value_grid(vm)
    assert z.shape == (12, 2)
    assert z[0, 0] == 30.0
    assert z[6, 1] == 20.0
    assert np.isnan(z[1, 0])


def test_sparkline_xy_scaling_and_gaps(vm):
    cell = vm.model.cell(2022, 1)
    xs, ys = sparkline_xy(vm, cell)

    assert len(xs) == len(ys) == 3
    # day 1 at left edge, day 31 at right edge of column 0
    assert xs[0] == pytest.approx(-0.45)
    assert xs[2] == pytest.approx(0.45)
    # global range 0..30 -> 10 maps to a third of the way up, 30 to the top
    assert ys[0] == pytest.approx(0.38 - (10 / 30) * 0.76)
    assert ys[1] is None
    assert ys[2] == pytest.approx(-0.38)


def test_figure_has_heatmap_and_sparklines(vm):
    fig = matrix_figure(vm)
    heat, lines = fig.data

    assert heat.type == "heatmap"
    assert heat.zmin == 0.0
    assert heat.zmax == 30.0
    assert heat.reversescale is True
    assert lines.type == "scatter"
    assert lines.connectgaps is False
    # 3 + 1 points plus one separator per non-empty cell
    assert len(lines.x) == 3 + 1 + 2
    assert list(fig.layout.xaxis.ticktext) == ["2022", "2023"]
    assert fig.layout.yaxis.ticktext[0] == "January"


def test_figure_follows_toggle(vm):
    before = matrix_figure(vm)
    vm.toggle_mode()
    after = matrix_figure(vm)

    assert np.asarray(before.data[0].z)[0][0] == 30.0
    assert np.asarray(after.data[0].z)[0][0] == 0.0
    assert "MIN" in after.layout.title.text


def test_hover_text(vm):
    assert hover_text(vm, vm.model.cell(2022, 1)) == "<b>January 2022</b><br>MAX: 30.0 °C"
    assert hover_text(vm, vm.model.cell(2022, 2)).endswith("no data")


def test_figure_with_blank_max_column():
    rows = [
        {"date": "2022-01-01", "max_temperature": "", "min_temperature": "10"},
        {"date": "2022-01-02", "max_temperature": "", "min_temperature": "11"},
        {"date": "2022-02-01", "max_temperature": "", "min_temperature": "12"},
    ]
    vm = build_view_model(rows, window_years=1)

    fig_max = matrix_figure(vm)
    assert np.isnan(np.asarray(fig_max.data[0].z, dtype=float)).all()
    assert all(y is None for y in fig_max.data[1].y)

    vm.toggle_mode()
    fig_min = matrix_figure(vm)
    assert fig_min.data[0].zmin == 10.0
    assert fig_min.data[0].zmax == 12.0
    xs, ys = sparkline_xy(vm, vm.model.cell(2022, 1))
    assert ys[0] == pytest.approx(0.38)
    assert ys[1] == pytest.approx(0.0)
