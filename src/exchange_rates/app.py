"""
Exchange rates command entry point.

Fetches Coinbase and Binance prices, prints them to stdout as CSV and
returns a process exit status. Logs go to stderr so stdout stays pure CSV.
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from src.exchange_rates.config import ExchangeRatesConfig
from src.exchange_rates.exceptions import ExchangeRatesError
from src.exchange_rates.service.aggregator import PriceAggregator
from src.exchange_rates.service.output import write_rows

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records at `level` and above to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(config: ExchangeRatesConfig | None = None) -> int:
    """
    Run one aggregation and print the result.

    Args:
        config: Service configuration, loaded from the environment if omitted

    Returns:
        0 on success, 1 if the configuration is invalid or either exchange
        failed

    """
    if config is None:
        try:
            config = ExchangeRatesConfig.from_env()
        except ValidationError as e:
            configure_logging("ERROR")
            logger.error(f"Invalid configuration: {e}")
            return 1

    configure_logging(config.log_level)

    aggregator = PriceAggregator.from_config(config)

    try:
        rows = asyncio.run(aggregator.run())
    except ExchangeRatesError as e:
        logger.error(f"Failed to fetch exchange rates: {e}")
        return 1

    write_rows(rows, sys.stdout)
    return 0
