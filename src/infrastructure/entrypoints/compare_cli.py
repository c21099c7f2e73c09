"""
Command-line front-end for the stock comparison form.

Wires HttpStockQueryClient into StockFormController, submits once and prints
the resulting table. The API server must be running.

    python -m src.infrastructure.entrypoints.compare_cli AAPL MSFT \
        --start 2024-01-01 --end 2024-01-31
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv

from src.application.controllers.stock_form import StockFormController
from src.application.presenters.stock_report import build_table_rows
from src.domain.exceptions import NetworkFailureError, ValidationError
from src.infrastructure.config.settings import Settings, configure_logging
from src.infrastructure.stock_data.http_query_client import HttpStockQueryClient


def format_table(rows: list[dict]) -> str:
    if not rows:
        return "No data for the selected range."
    headers = list(rows[0].keys())
    lines = ["\t".join(headers)]
    for row in rows:
        lines.append("\t".join("N/A" if row[h] is None else str(row[h]) for h in headers))
    return "\n".join(lines)


async def run(
    controller: StockFormController,
    tickers: list[str],
    start_date: str,
    end_date: str,
) -> int:
    controller.select_tickers(tickers)
    controller.set_start_date(start_date)
    controller.set_end_date(end_date)
    try:
        series = await controller.submit()
    except (ValidationError, NetworkFailureError):
        print(controller.error_message, file=sys.stderr)
        return 1
    print(format_table(build_table_rows(series)))
    return 0


async def _main(args: argparse.Namespace, settings: Settings) -> int:
    async with HttpStockQueryClient(args.api_url) as client:
        controller = StockFormController(client, available_tickers=settings.tickers)
        return await run(controller, args.tickers, args.start, args.end)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Compare closing prices for stock tickers.")
    parser.add_argument("tickers", nargs="*")
    parser.add_argument("--start", default="")
    parser.add_argument("--end", default="")
    parser.add_argument("--api-url", default=settings.api_url)
    args = parser.parse_args(argv)

    return asyncio.run(_main(args, settings))


if __name__ == "__main__":
    sys.exit(main())
