from __future__ import annotations

from typing import Callable, MutableMapping

import pandas as pd

from app_core.matrix.pipeline import PipelineResult, run_pipeline
from app_core.matrix.view_model import ViewState

RESULT_KEY = "matrix_result"
SOURCE_KEY = "matrix_source_key"
STATE_KEY = "matrix_view_state"


def get_matrix_result(
    session: MutableMapping,
    load_rows: Callable[[str], pd.DataFrame],
    source: str,
    window_years: int,
) -> PipelineResult:
    """
    Build the pipeline once per (source, window) and keep it in `session`
    (st.session_state in the app). The ViewState lives in the session as
    well, so the selected mode survives a rebuild with a new window.
    """
    key = (str(source), int(window_years))
    cached = session.get(RESULT_KEY)
    if cached is not None and session.get(SOURCE_KEY) == key:
        return cached

    state = session.get(STATE_KEY)
    if state is None:
        state = ViewState()

    result = run_pipeline(load_rows(source), window_years=window_years, state=state)
    session[STATE_KEY] = state
    session[RESULT_KEY] = result
    session[SOURCE_KEY] = key
    return result
