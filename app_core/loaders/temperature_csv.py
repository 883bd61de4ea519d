
# temperature_csv.py
import io
import logging
from pathlib import Path
from typing import Union

import pandas as pd
import requests
import streamlit as st

from app_core.config import DEFAULT_CSV_URL

logger = logging.getLogger(__name__)

REQUIRED_COLS = ("date", "max_temperature", "min_temperature")


def _parse_csv(text_or_path) -> pd.DataFrame:
    # everything as str: empty cells stay "" and the normalizer does the parsing
    df = pd.read_csv(text_or_path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV is missing required columns: {missing}")
    return df


@st.cache_data(show_spinner=True, ttl=6*3600)
def fetch_temperature_csv(url: str = DEFAULT_CSV_URL, timeout: int = 60) -> pd.DataFrame:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    df = _parse_csv(io.StringIO(r.text))
    logger.info("Fetched %d rows from %s", len(df), url)
    return df


@st.cache_data(show_spinner=False)
def load_temperature_csv(csv_path: Union[str, Path]) -> pd.DataFrame:
    """Load a local daily temperature CSV. Cached for speed."""
    df = _parse_csv(csv_path)
    logger.info("Loaded %d rows from %s", len(df), csv_path)
    return df


def load_temperature_source(source: Union[str, Path] = DEFAULT_CSV_URL) -> pd.DataFrame:
    """Dispatch to the HTTP or local loader depending on the source."""
    s = str(source)
    if s.startswith(("http://", "https://")):
        return fetch_temperature_csv(s)
    return load_temperature_csv(s)
