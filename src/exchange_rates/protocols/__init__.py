"""Price source protocols."""

from src.exchange_rates.protocols.sources import (
    SnapshotQuoteSource,
    StreamingQuoteSource,
)

__all__ = [
    "SnapshotQuoteSource",
    "StreamingQuoteSource",
]
