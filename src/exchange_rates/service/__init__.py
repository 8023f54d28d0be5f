"""Aggregation and output services."""

from src.exchange_rates.service.aggregator import PriceAggregator
from src.exchange_rates.service.output import CSV_HEADER, write_rows

__all__ = ["CSV_HEADER", "PriceAggregator", "write_rows"]
