"""
Form controller: collects ticker and date selections, then queries each ticker
in turn through an injected IStockQueryClient.

State machine:
    IDLE -> SUBMITTING -> SUCCESS | FAILED
SUCCESS and FAILED go back through SUBMITTING on the next submit(). A call to
submit() while SUBMITTING is rejected.
"""

import enum
import logging
from typing import Iterable, Optional

from src.domain.entities.stock_price import TickerSeries
from src.domain.exceptions import SubmissionInProgressError, ValidationError
from src.domain.ports.stock_data_port import IStockQueryClient

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please select at least one ticker and fill in all fields."
FETCH_ERROR_MESSAGE = "Error fetching stock data."


class FormState(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


class StockFormController:
    def __init__(
        self,
        client: IStockQueryClient,
        available_tickers: Iterable[str] = ("AAPL", "MSFT", "AMZN"),
    ) -> None:
        """
        Args:
            client:            IStockQueryClient implementation (e.g. HttpStockQueryClient).
            available_tickers: Tickers offered for selection.
        """
        self._client = client
        self.available_tickers: tuple[str, ...] = tuple(available_tickers)
        self.selected_tickers: list[str] = []
        self.start_date: str = ""
        self.end_date: str = ""
        self.state = FormState.IDLE
        self.error_message: str = ""
        self.results: list[TickerSeries] = []

    def select_tickers(self, tickers: Iterable[str]) -> None:
        self.selected_tickers = list(tickers)

    def set_start_date(self, value: Optional[str]) -> None:
        self.start_date = value or ""

    def set_end_date(self, value: Optional[str]) -> None:
        self.end_date = value or ""

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    async def submit(self) -> list[TickerSeries]:
        """Query every selected ticker, one request at a time.

        Returns:
            One TickerSeries per selected ticker, in selection order.

        Raises:
            SubmissionInProgressError: if a submission is already running.
            ValidationError: if no ticker is selected or a date is missing.
                No request is made.
            NetworkFailureError: if any query fails. Results gathered so far
                are discarded and the previous results are left in place.
                Any other error from the client ends the run the same way.
        """
        if self.is_submitting:
            raise SubmissionInProgressError("A submission is already in progress.")

        if not self.selected_tickers or not self.start_date or not self.end_date:
            self.state = FormState.FAILED
            self.error_message = VALIDATION_MESSAGE
            raise ValidationError(VALIDATION_MESSAGE)

        self.state = FormState.SUBMITTING
        self.error_message = ""
        fetched: list[TickerSeries] = []
        try:
            for ticker in self.selected_tickers:
                records = await self._client.query(ticker, self.start_date, self.end_date)
                fetched.append(TickerSeries(ticker=ticker, records=records))
        except Exception as exc:
            logger.warning("Fetching %s failed: %s", self.selected_tickers, exc)
            self.state = FormState.FAILED
            self.error_message = FETCH_ERROR_MESSAGE
            raise

        self.results = fetched
        self.state = FormState.SUCCESS
        return fetched
