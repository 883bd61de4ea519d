
# pages/11_Monthly_Table.py
import requests
import streamlit as st

from app_core.config import Settings, TEMPERATURE_UNIT
from app_core.loaders.temperature_csv import load_temperature_source
from app_core.matrix.aggregate import matrix_to_frame
from app_core.matrix.errors import EmptyDatasetError
from app_core.matrix.session import get_matrix_result

st.title("Monthly Table")
st.caption("One row per (year, month). Mini line chart shows the daily values for the active mode.")

settings = Settings.from_env()
source = st.session_state.get("csv_source", settings.csv_source)
window = int(st.session_state.get("window_years", settings.window_years))

try:
    result = get_matrix_result(st.session_state, load_temperature_source, source, window)
except requests.RequestException as e:
    st.error(f"Could not download the CSV: {e}")
    st.stop()
except (OSError, ValueError) as e:
    st.error(f"Could not read the CSV: {e}")
    st.stop()
except EmptyDatasetError as e:
    st.error(f"Nothing to show: {e}")
    st.stop()

vm = result.view_model
st.caption(f"Active mode → **{vm.mode.value}** • window {vm.model.years[0]}–{vm.model.years[-1]}")

table = matrix_to_frame(vm.model)
table["Daily"] = [
    [p.value for p in vm.sparkline_series(c) if not p.is_gap]
    for c in sorted(vm.model.cells, key=lambda c: (c.year, c.month))
]

st.dataframe(
    table,
    use_container_width=True,
    hide_index=True,
    column_config={
        "month_max": st.column_config.NumberColumn(f"Max ({TEMPERATURE_UNIT})", format="%.1f"),
        "month_min": st.column_config.NumberColumn(f"Min ({TEMPERATURE_UNIT})", format="%.1f"),
        "Daily": st.column_config.LineChartColumn("Daily", width="medium"),
    },
)

empty = table[table["n_days"] == 0]
if not empty.empty:
    st.info(f"{len(empty)} month(s) in the window have no records.")

st.download_button(
    "Download CSV",
    data=table.drop(columns=["Daily"]).to_csv(index=False).encode("utf-8"),
    file_name="monthly_matrix.csv",
    mime="text/csv",
)
