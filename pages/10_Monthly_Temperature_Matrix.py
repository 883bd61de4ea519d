
# pages/10_Monthly_Temperature_Matrix.py
import requests
import streamlit as st

from app_core.charts.matrix_chart import matrix_figure
from app_core.config import Settings
from app_core.loaders.temperature_csv import load_temperature_source
from app_core.logging_config import setup_logging
from app_core.matrix.errors import EmptyDatasetError
from app_core.matrix.session import get_matrix_result

settings = Settings.from_env()
setup_logging(settings.log_level)

st.title("Monthly Matrix View — Daily Temperature")
st.caption("Years on x, months on y. Cell colour = monthly max/min; the line inside each cell shows the daily values.")

# Sidebar controls (shared with the table page through session_state)
with st.sidebar:
    source = st.text_input("CSV source (URL or path)", value=st.session_state.get("csv_source", settings.csv_source))
    window = st.number_input(
        "Years to show", min_value=1, max_value=50,
        value=int(st.session_state.get("window_years", settings.window_years)), step=1,
    )
st.session_state["csv_source"] = source
st.session_state["window_years"] = int(window)

try:
    result = get_matrix_result(st.session_state, load_temperature_source, source, int(window))
except requests.RequestException as e:
    st.error(f"Could not download the CSV: {e}")
    st.stop()
except (OSError, ValueError) as e:
    st.error(f"Could not read the CSV: {e}")
    st.stop()
except EmptyDatasetError as e:
    st.error(f"Nothing to draw: {e}")
    st.stop()

vm = result.view_model

# Toggle runs before the rerun, so the chart below already uses the new mode
st.button(vm.toggle_label(), on_click=vm.toggle_mode, key="toggle_mode", type="primary")

st.plotly_chart(
    matrix_figure(vm, title=f"Monthly Matrix View — Hong Kong (Last {len(vm.model.years)} Years)"),
    use_container_width=True,
)

if result.n_dropped:
    st.warning(f"{result.n_dropped} of {result.n_rows} rows could not be parsed and were skipped.")

with st.expander("Notes"):
    st.markdown(
        """
- **Colour** uses one scale for the whole matrix (global min → max), red = hot, blue = cold.
- **Mini lines** share the same temperature axis; breaks mean missing daily values.
- Empty cells have no data for that month.
        """
    )
