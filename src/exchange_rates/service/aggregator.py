"""
Price aggregation across exchanges.

This module runs the streaming and snapshot sources side by side and merges
their quotes into one sorted table. It is exchange-agnostic: the sources are
injected, and `from_config` wires the Coinbase and Binance adapters.
"""

import asyncio
import logging
from collections.abc import Sequence

from src.exchange_rates.adapters.binance.snapshot import BinancePriceFetcher
from src.exchange_rates.adapters.coinbase.stream import CoinbaseTickerCollector
from src.exchange_rates.config import ExchangeRatesConfig
from src.exchange_rates.enums import Exchange
from src.exchange_rates.model.quote import AggregatedRow, SymbolRemap
from src.exchange_rates.protocols.sources import (
    SnapshotQuoteSource,
    StreamingQuoteSource,
)

logger = logging.getLogger(__name__)


class PriceAggregator:
    """
    Merges quotes from a streaming and a snapshot source.

    Both sources run concurrently. The result is all-or-nothing: if either
    source raises, the other is cancelled and the error propagates.
    """

    def __init__(
        self,
        streaming_source: StreamingQuoteSource,
        snapshot_source: SnapshotQuoteSource,
        product_ids: Sequence[str],
        symbol_remap: SymbolRemap,
        streaming_exchange: Exchange = Exchange.COINBASE,
        snapshot_exchange: Exchange = Exchange.BINANCE,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            streaming_source: Source collecting live tickers
            snapshot_source: Source returning a one-shot price list
            product_ids: Products requested from the streaming source
            symbol_remap: Symbol pairs requested from the snapshot source
            streaming_exchange: Label for streaming rows
            snapshot_exchange: Label for snapshot rows

        """
        self.streaming_source = streaming_source
        self.snapshot_source = snapshot_source
        self.product_ids = list(product_ids)
        self.symbol_remap = list(symbol_remap)
        self.streaming_exchange = streaming_exchange
        self.snapshot_exchange = snapshot_exchange

    @classmethod
    def from_config(cls, config: ExchangeRatesConfig) -> "PriceAggregator":
        """
        Build an aggregator over Coinbase and Binance.

        Args:
            config: Service configuration

        Returns:
            Aggregator wired with the configured endpoints and markets

        """
        return cls(
            streaming_source=CoinbaseTickerCollector(ws_url=config.coinbase.ws_url),
            snapshot_source=BinancePriceFetcher(
                api_url=config.binance.api_url,
                ticker_price_path=config.binance.ticker_price_path,
                request_timeout=config.binance.request_timeout,
            ),
            product_ids=config.coinbase.product_ids,
            symbol_remap=config.binance.symbol_remap,
        )

    async def run(self) -> list[AggregatedRow]:
        """
        Fetch both sources concurrently and return the merged, sorted rows.

        Returns:
            Rows sorted by their formatted CSV line

        Raises:
            Whatever the first failing source raised

        """
        # The task group cancels the sibling when one source fails, and both
        # sources when run() itself is cancelled
        try:
            async with asyncio.TaskGroup() as group:
                streaming_task = group.create_task(
                    self.streaming_source.collect(self.product_ids)
                )
                snapshot_task = group.create_task(
                    self.snapshot_source.fetch(self.symbol_remap)
                )
        except ExceptionGroup as eg:
            logger.info(f"Price fetch failed: {eg.exceptions[0]}")
            raise eg.exceptions[0]

        rows = [
            AggregatedRow.from_quote(self.streaming_exchange, quote)
            for quote in streaming_task.result()
        ]
        rows.extend(
            AggregatedRow.from_quote(self.snapshot_exchange, quote)
            for quote in snapshot_task.result()
        )

        # Sort on the formatted line so ties resolve by natural string order
        return sorted(rows, key=lambda row: row.to_csv_line())
