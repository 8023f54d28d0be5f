"""Exchange rates service package."""

from src.exchange_rates.model import AggregatedRow, TickerQuote
from src.exchange_rates.service import PriceAggregator

__all__ = ["AggregatedRow", "PriceAggregator", "TickerQuote"]
