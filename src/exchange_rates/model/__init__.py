"""Exchange rate data models."""

from src.exchange_rates.model.quote import AggregatedRow, SymbolRemap, TickerQuote

__all__ = [
    "AggregatedRow",
    "SymbolRemap",
    "TickerQuote",
]
