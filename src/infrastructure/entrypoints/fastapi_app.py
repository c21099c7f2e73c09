"""
FastAPI entry point for the stock query endpoint.

This module is the Composition Root for the API: it wires the CSV dataset
adapter into QueryStockPricesUseCase and maps domain exceptions to JSON error
bodies of shape {"error": "<message>"}.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

from src.application.use_cases.query_stock_prices import QueryStockPricesUseCase  # noqa: E402
from src.domain.exceptions import DataUnavailableError, MalformedInputError  # noqa: E402
from src.domain.ports.stock_data_port import IStockDataset  # noqa: E402
from src.infrastructure.config.settings import Settings, configure_logging  # noqa: E402
from src.infrastructure.stock_data.csv_dataset import CsvStockDataset  # noqa: E402

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"


class StockQueryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ticker: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")


def create_app(dataset: IStockDataset) -> FastAPI:
    """Build the API around *dataset*. Tests pass a dataset over a temp file."""
    query_use_case = QueryStockPricesUseCase(dataset)
    app = FastAPI(title="Stock Price Query API")

    @app.exception_handler(MalformedInputError)
    async def malformed_input_handler(request: Request, exc: MalformedInputError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(DataUnavailableError)
    async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
        logger.error("Dataset unavailable: %s", exc, exc_info=exc)
        return JSONResponse(status_code=503, content={"error": "Stock data unavailable"})

    @app.post("/api/stocks")
    def query_stocks(body: StockQueryRequest):
        """Return every dataset row for one ticker within [startDate, endDate]."""
        if not body.ticker or not body.start_date or not body.end_date:
            raise MalformedInputError(MISSING_FIELDS_MESSAGE)

        records = query_use_case.execute(body.ticker, body.start_date, body.end_date)
        logger.info(
            "Served %d rows for %s %s..%s",
            len(records),
            body.ticker,
            body.start_date,
            body.end_date,
        )
        return {"message": "Success", "data": [r.to_dict() for r in records]}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


# ---------------------------------------------------------------------------
# Composition Root: wire dependencies once at startup
# ---------------------------------------------------------------------------
_settings = Settings.from_env()
configure_logging(_settings.log_level)

app = create_app(CsvStockDataset(_settings.dataset_path))
