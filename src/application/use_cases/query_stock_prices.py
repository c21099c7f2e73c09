"""
Use-case: return every dataset row for one ticker within an inclusive date range.
Depends only on Domain ports and entities, no infrastructure imports.
"""

import logging
from datetime import date, datetime
from typing import Union

from src.domain.entities.stock_price import StockQuery, StockRecord
from src.domain.exceptions import MalformedInputError
from src.domain.ports.stock_data_port import IStockDataset

logger = logging.getLogger(__name__)

DateLike = Union[date, str]


def parse_day(value: DateLike) -> date:
    """Coerce *value* to a calendar date, dropping any time-of-day.

    Raises:
        MalformedInputError: if *value* is not an ISO-8601 date or date-time.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise MalformedInputError(f"Invalid date: {value}") from exc


class QueryStockPricesUseCase:
    def __init__(self, dataset: IStockDataset) -> None:
        self._dataset = dataset

    def execute(
        self,
        ticker: str,
        start_date: DateLike,
        end_date: DateLike,
    ) -> list[StockRecord]:
        """Filter the dataset for *ticker* between *start_date* and *end_date*.

        Args:
            ticker:     Ticker symbol, compared case-sensitively.
            start_date: First day of the range (inclusive).
            end_date:   Last day of the range (inclusive). An end before the
                        start is not an error; it simply matches nothing.

        Returns:
            Matching records in dataset order.

        Raises:
            MalformedInputError: if *ticker* is blank or a date is unparseable.
            DataUnavailableError: propagated from the dataset.
        """
        if not ticker or not ticker.strip():
            raise MalformedInputError("ticker must be a non-empty string")
        query = StockQuery(
            ticker=ticker,
            start_date=parse_day(start_date),
            end_date=parse_day(end_date),
        )
        records = [r for r in self._dataset.load() if query.matches(r)]
        logger.debug(
            "Query %s %s..%s matched %d rows",
            query.ticker,
            query.start_date,
            query.end_date,
            len(records),
        )
        return records
