"""Tests for the compare CLI: table formatting and exit codes."""

from __future__ import annotations

import asyncio

from src.application.controllers.stock_form import VALIDATION_MESSAGE, StockFormController
from src.domain.exceptions import NetworkFailureError
from src.domain.ports.stock_data_port import IStockQueryClient
from src.infrastructure.entrypoints.compare_cli import format_table, run


class _StaticClient(IStockQueryClient):
    def __init__(self, fail=False):
        self.fail = fail

    async def query(self, ticker, start_date, end_date):
        if self.fail:
            raise NetworkFailureError("down")
        return [{"date": start_date, "ticker": ticker, "close": 10.0}]


def test_format_table_renders_none_as_na():
    rows = [{"date": "2024-01-02", "AAPL Close": 1.5, "MSFT Close": None}]
    assert format_table(rows) == "date\tAAPL Close\tMSFT Close\n2024-01-02\t1.5\tN/A"


def test_format_table_empty():
    assert format_table([]) == "No data for the selected range."


def test_run_prints_table(capsys):
    form = StockFormController(_StaticClient())
    code = asyncio.run(run(form, ["AAPL", "MSFT"], "2024-01-02", "2024-01-31"))
    assert code == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["date\tAAPL Close\tMSFT Close", "2024-01-02\t10.0\t10.0"]


def test_run_reports_validation_error(capsys):
    form = StockFormController(_StaticClient())
    code = asyncio.run(run(form, [], "2024-01-02", "2024-01-31"))
    assert code == 1
    assert VALIDATION_MESSAGE in capsys.readouterr().err


def test_run_reports_fetch_error(capsys):
    form = StockFormController(_StaticClient(fail=True))
    code = asyncio.run(run(form, ["AAPL"], "2024-01-02", "2024-01-31"))
    assert code == 1
    assert "Error fetching stock data." in capsys.readouterr().err
