"""Tests for the yfinance dataset builder, with yfinance patched out."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock, patch

import pandas as pd

from src.infrastructure.stock_data import build_dataset as builder
from src.infrastructure.stock_data.csv_dataset import CsvStockDataset


def _history(rows):
    index = pd.DatetimeIndex([pd.Timestamp(d) for d, *_ in rows], name="Date")
    return pd.DataFrame(
        [
            {"Open": o, "High": h, "Low": lo, "Close": c, "Volume": v}
            for _, o, h, lo, c, v in rows
        ],
        index=index,
    )


def _fake_ticker(histories):
    def factory(symbol):
        ticker = MagicMock()
        ticker.history.return_value = histories.get(symbol, pd.DataFrame())
        return ticker

    return factory


def test_fetch_history_requests_inclusive_end():
    ticker = MagicMock()
    ticker.history.return_value = _history([("2024-01-02", 1, 2, 0.5, 1.5, 100)])
    with patch.object(builder.yf, "Ticker", return_value=ticker):
        frame = builder.fetch_history("AAPL", date(2024, 1, 1), date(2024, 1, 31))

    ticker.history.assert_called_once_with(start="2024-01-01", end="2024-02-01", interval="1d")
    assert list(frame.columns) == builder.COLUMNS
    assert frame.iloc[0].to_dict() == {
        "Date": "2024-01-02",
        "Open": 1.0,
        "High": 2.0,
        "Low": 0.5,
        "Close": 1.5,
        "Volume": 100,
        "Ticker": "AAPL",
    }


def test_build_dataset_writes_readable_csv(tmp_path):
    histories = {
        "AAPL": _history([("2024-01-02", 185.1, 186.4, 184.5, 185.64, 52000000)]),
        "MSFT": _history([("2024-01-02", 370.1, 371.0, 369.2, 370.87, 24000000)]),
    }
    output = tmp_path / "out" / "StockPrices.csv"
    with patch.object(builder.yf, "Ticker", side_effect=_fake_ticker(histories)):
        total = builder.build_dataset(["AAPL", "MSFT", "ZZZZ"], date(2024, 1, 1), date(2024, 1, 5), str(output))

    assert total == 2
    records = CsvStockDataset(str(output)).load()
    assert [(r.ticker, r.date, r.close) for r in records] == [
        ("AAPL", date(2024, 1, 2), 185.64),
        ("MSFT", date(2024, 1, 2), 370.87),
    ]
    assert records[0].extra["Volume"] == "52000000"
