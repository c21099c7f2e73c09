"""
Runtime settings read from environment variables.

Entrypoints call load_dotenv() before Settings.from_env() so a local .env file
can supply any of these values.
"""

import logging
import os
from dataclasses import dataclass

DEFAULT_DATASET_PATH = "data/StockPrices.csv"
DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TICKERS = ("AAPL", "MSFT", "AMZN")


@dataclass(frozen=True)
class Settings:
    dataset_path: str = DEFAULT_DATASET_PATH
    api_url: str = DEFAULT_API_URL
    tickers: tuple[str, ...] = DEFAULT_TICKERS
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        raw_tickers = os.environ.get("STOCK_TICKERS", "")
        tickers = tuple(t.strip() for t in raw_tickers.split(",") if t.strip())
        return cls(
            dataset_path=os.environ.get("STOCK_DATASET_PATH", DEFAULT_DATASET_PATH),
            api_url=os.environ.get("STOCK_API_URL", DEFAULT_API_URL),
            tickers=tickers or DEFAULT_TICKERS,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
