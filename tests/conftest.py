import sys
from pathlib import Path

import pytest

# Add repo root to Python path so `import app_core...` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def two_year_rows():
    """Raw CSV-like rows for Jan 2022 and Jan 2023."""
    return [
        {"date": "2022-01-01", "max_temperature": "20", "min_temperature": "10"},
        {"date": "2023-01-01", "max_temperature": "22", "min_temperature": "11"},
    ]
