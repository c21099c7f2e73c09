"""
Ports (interfaces) for stock data access.
Infrastructure adapters (e.g. CsvStockDataset, HttpStockQueryClient) must
implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities.stock_price import StockRecord


class IStockDataset(ABC):
    @abstractmethod
    def load(self) -> list[StockRecord]:
        """Read and parse the whole dataset, in file order.

        Raises:
            DataUnavailableError: if the underlying source cannot be read.
        """
        ...


class IStockQueryClient(ABC):
    @abstractmethod
    async def query(
        self, ticker: str, start_date: str, end_date: str
    ) -> list[dict[str, Any]]:
        """Fetch the serialised records for one ticker and date range.

        Raises:
            NetworkFailureError: on transport failure or a non-2xx response.
        """
        ...
