"""
Price Source Protocols.

This module defines the contracts the aggregator relies on. Exchange adapters
satisfy them through structural typing without inheriting from them, which
also lets tests hand the aggregator simple fakes.

Key design principles:
- Each source owns its own protocol lifecycle
- Both sources return the same neutral TickerQuote type
- A source either returns a complete result or raises
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from src.exchange_rates.model.quote import SymbolRemap, TickerQuote


@runtime_checkable
class StreamingQuoteSource(Protocol):
    """
    Protocol for a source that pushes ticker updates after a subscription.

    Semantic Role: Live price collection
    Relationships:
    - Input: Exchange-native product identifiers
    - Output: Exactly one quote per requested identifier
    """

    async def collect(self, symbols: Iterable[str]) -> list[TickerQuote]:
        """
        Collect one quote for every requested symbol.

        Args:
            symbols: Non-empty collection of product identifiers

        Returns:
            One quote per symbol, last received value wins

        """
        ...


@runtime_checkable
class SnapshotQuoteSource(Protocol):
    """
    Protocol for a source that returns every price in a single response.

    Semantic Role: One-shot price lookup
    Relationships:
    - Input: Ordered remap from exchange symbols to output symbols
    - Output: Quotes for remapped symbols only, renamed
    """

    async def fetch(self, remap: SymbolRemap) -> list[TickerQuote]:
        """
        Fetch and rename the quotes named in the remap.

        Args:
            remap: Ordered (source_symbol, target_symbol) pairs

        Returns:
            Quotes for matched symbols, in response order

        """
        ...
