"""
Domain entities for stock price rows and per-ticker query results.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class StockRecord:
    """One dataset row. Columns other than date/ticker/close ride along in *extra*."""

    date: date
    ticker: str
    close: Optional[float]
    extra: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "date": self.date.isoformat(),
            "ticker": self.ticker,
            "close": self.close,
        }


@dataclass(frozen=True)
class StockQuery:
    ticker: str
    start_date: date
    end_date: date

    def matches(self, record: StockRecord) -> bool:
        return (
            record.ticker == self.ticker
            and self.start_date <= record.date <= self.end_date
        )


@dataclass(frozen=True)
class TickerSeries:
    ticker: str
    records: list[dict[str, Any]]
