"""
Infrastructure adapter: delimited text file -> IStockDataset.

All pandas details are confined here. The file is re-read on every load() so
edits to the CSV are visible to the next query without a restart.
"""

import csv
import logging
import math
import os
from datetime import date
from typing import Optional

import pandas as pd

from src.domain.entities.stock_price import StockRecord
from src.domain.exceptions import DataUnavailableError
from src.domain.ports.stock_data_port import IStockDataset

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "ticker", "close")


class CsvStockDataset(IStockDataset):
    """Parses a CSV with at least Date, Ticker and Close columns (any casing)."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> list[StockRecord]:
        frame = self._read()
        columns = self._resolve_columns(frame)
        date_col, ticker_col, close_col = (columns[name] for name in REQUIRED_COLUMNS)
        extra_cols = [c for c in frame.columns if c not in columns.values()]

        closes = pd.to_numeric(frame[close_col], errors="coerce")

        records: list[StockRecord] = []
        skipped = 0
        for idx, row in frame.iterrows():
            day = _parse_day(row[date_col])
            if day is None:
                skipped += 1
                continue
            records.append(
                StockRecord(
                    date=day,
                    ticker=str(row[ticker_col]).strip(),
                    close=_finite_or_none(closes.loc[idx]),
                    extra={c: row[c] for c in extra_cols},
                )
            )
        if skipped:
            logger.debug("Skipped %d rows with unparseable dates in %s", skipped, self._path)
        return records

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _read(self) -> pd.DataFrame:
        if not os.path.isfile(self._path):
            raise DataUnavailableError(f"Dataset not found: {self._path}")
        try:
            return pd.read_csv(
                self._path,
                sep=None,
                engine="python",
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except (
            OSError,
            UnicodeDecodeError,
            csv.Error,
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
        ) as exc:
            raise DataUnavailableError(f"Cannot read dataset {self._path}: {exc}") from exc

    def _resolve_columns(self, frame: pd.DataFrame) -> dict[str, str]:
        """Map lowercase required names to the file's actual header names."""
        by_lower = {}
        for column in frame.columns:
            by_lower.setdefault(str(column).strip().lower(), column)
        missing = [name for name in REQUIRED_COLUMNS if name not in by_lower]
        if missing:
            raise DataUnavailableError(
                f"Dataset {self._path} is missing required columns: {', '.join(missing)}"
            )
        return {name: by_lower[name] for name in REQUIRED_COLUMNS}


def _parse_day(value: str) -> Optional[date]:
    """Calendar day of *value* as written, in its own UTC offset if it has one."""
    try:
        stamp = pd.Timestamp(value)
    except (ValueError, TypeError):
        return None
    if pd.isna(stamp):
        return None
    return stamp.date()


def _finite_or_none(value) -> Optional[float]:
    if pd.isna(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None
