"""Shared fixtures: small CSV datasets written to tmp_path."""

from __future__ import annotations

import pytest

SAMPLE_CSV = """Date,Open,Close,Volume,Ticker
2024-01-01,99.5,100,1000,AAPL
2024-01-15,370.0,372.5,2000,MSFT
2024-01-31,104.0,105,1500,AAPL
2024-02-01,108.0,110,1800,AAPL
2024-02-01,380.0,381.25,2100,MSFT
"""


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper that writes *text* to a CSV under tmp_path and returns its path."""

    def _write(text: str, name: str = "StockPrices.csv") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def sample_csv(write_csv) -> str:
    return write_csv(SAMPLE_CSV)
