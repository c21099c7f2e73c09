"""
Builds the CSV dataset served by the stock query endpoint from Yahoo Finance
daily history, via the yfinance library.

Run once locally before starting the API:

    python -m src.infrastructure.stock_data.build_dataset AAPL MSFT AMZN \
        --start 2024-01-01 --end 2024-12-31 --output data/StockPrices.csv
"""

import argparse
import logging
import os
from datetime import date, timedelta
from typing import Iterable

import pandas as pd
import yfinance as yf
from dotenv import load_dotenv

from src.infrastructure.config.settings import Settings, configure_logging

logger = logging.getLogger(__name__)

COLUMNS = ["Date", "Open", "High", "Low", "Close", "Volume", "Ticker"]


def fetch_history(symbol: str, start_date: date, end_date: date) -> pd.DataFrame:
    """Daily OHLCV rows for *symbol* in the dataset layout, both ends inclusive."""
    ticker = yf.Ticker(symbol)
    # yfinance treats `end` as exclusive
    history = ticker.history(
        start=start_date.isoformat(),
        end=(end_date + timedelta(days=1)).isoformat(),
        interval="1d",
    )
    if history.empty:
        logger.warning("No historical data available for symbol: %r", symbol)
        return pd.DataFrame(columns=COLUMNS)

    records = [
        {
            "Date": day.strftime("%Y-%m-%d"),
            "Open": round(float(row["Open"]), 4),
            "High": round(float(row["High"]), 4),
            "Low": round(float(row["Low"]), 4),
            "Close": round(float(row["Close"]), 4),
            "Volume": int(row["Volume"]),
            "Ticker": symbol,
        }
        for day, row in history.iterrows()
    ]
    return pd.DataFrame(records, columns=COLUMNS)


def build_dataset(
    symbols: Iterable[str], start_date: date, end_date: date, output: str
) -> int:
    """Fetch every symbol and write one combined CSV. Returns the row count."""
    frames = []
    for symbol in symbols:
        frame = fetch_history(symbol, start_date, end_date)
        logger.info("Fetched %d rows for %s", len(frame), symbol)
        if not frame.empty:
            frames.append(frame)

    combined = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame(columns=COLUMNS)
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)
    combined.to_csv(output, index=False)
    return len(combined)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Build the stock price CSV dataset.")
    parser.add_argument("symbols", nargs="*", default=list(settings.tickers))
    parser.add_argument("--start", type=date.fromisoformat, required=True)
    parser.add_argument("--end", type=date.fromisoformat, default=date.today())
    parser.add_argument("--output", default=settings.dataset_path)
    args = parser.parse_args(argv)

    total = build_dataset(args.symbols, args.start, args.end, args.output)
    logger.info("Dataset complete: %d rows written to %s", total, args.output)


if __name__ == "__main__":
    main()
