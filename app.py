# app.py
from pathlib import Path
import streamlit as st

st.set_page_config(page_title="Monthly Temperature Matrix", page_icon="🌡️", layout="wide")

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Matrix
add("Matrix", "pages/10_Monthly_Temperature_Matrix.py", "Monthly Matrix", ":material/grid_on:")
add("Matrix", "pages/11_Monthly_Table.py", "Monthly Table", ":material/table_chart:")

# Overview
add("Overview", "pages/99_About.py", "About", ":material/info:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
