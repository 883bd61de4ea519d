# pages/99_About.py
import streamlit as st

from app_core.config import DEFAULT_CSV_URL, DEFAULT_WINDOW_YEARS

st.title("About this app")

st.markdown(
    f"""
This app draws a **year × month matrix** of daily temperature records (Hong Kong by default).

- **Colour** shows the monthly **maximum** or **minimum** temperature; use the button on the matrix page to switch.
- **Mini line charts** inside each cell show the daily values for that month.
- **Hover** a cell to see the month, year and value.
- The last **{DEFAULT_WINDOW_YEARS} years** are shown by default (change it in the sidebar).

Data: `{DEFAULT_CSV_URL}`
"""
)

st.divider()
st.subheader("Quick links")
st.page_link("pages/10_Monthly_Temperature_Matrix.py", label="Monthly Matrix", icon=":material/grid_on:")
st.page_link("pages/11_Monthly_Table.py", label="Monthly Table", icon=":material/table_chart:")

with st.expander("Configuration"):
    st.markdown(
        """
Environment variables: `TEMPERATURE_CSV_SOURCE` (URL or local path), `MATRIX_WINDOW_YEARS`, `LOG_LEVEL`.
        """
    )
