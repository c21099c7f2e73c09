"""
Presenters: turn collected TickerSeries into table rows and line-chart data.
Output is plain dicts/lists, ready for JSON or a charting front-end.
"""

from typing import Any

from src.domain.entities.stock_price import TickerSeries

# Assigned in ticker order, wrapping around.
PALETTE = (
    "#1F77B4",
    "#FF7F0E",
    "#2CA02C",
    "#D62728",
    "#9467BD",
    "#8C564B",
    "#E377C2",
    "#7F7F7F",
)


def close_column(ticker: str) -> str:
    return f"{ticker} Close"


def build_table_rows(series: list[TickerSeries]) -> list[dict[str, Any]]:
    """One row per date, with a "<TICKER> Close" column for every ticker.

    Dates keep their order of first appearance, scanning the series in order.
    A ticker with no row for a date gets None in that column.
    """
    rows: dict[str, dict[str, Any]] = {}
    columns = [close_column(s.ticker) for s in series]
    for s in series:
        for record in s.records:
            day = record.get("date")
            if day not in rows:
                rows[day] = {"date": day, **{c: None for c in columns}}
            rows[day][close_column(s.ticker)] = record.get("close")
    return list(rows.values())


def build_chart_data(series: list[TickerSeries]) -> dict[str, Any]:
    """Line-chart payload: labels from the first series, one dataset per ticker."""
    if not series:
        return {"labels": [], "datasets": []}
    datasets = [
        {
            "label": s.ticker,
            "data": [record.get("close") for record in s.records],
            "fill": False,
            "borderColor": PALETTE[idx % len(PALETTE)],
            "tension": 0.1,
        }
        for idx, s in enumerate(series)
    ]
    return {
        "labels": [record.get("date") for record in series[0].records],
        "datasets": datasets,
    }
