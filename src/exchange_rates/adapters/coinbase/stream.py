"""
Coinbase WebSocket ticker collection.

This module opens a single session against the Coinbase ticker feed,
subscribes to a set of products and gathers one price per product before
closing the session.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

import websockets
from websockets.exceptions import WebSocketException

from src.exchange_rates.adapters.coinbase.data import (
    CoinbaseSubscribeRequest,
    parse_ticker_frame,
)
from src.exchange_rates.enums import CollectorState
from src.exchange_rates.exceptions import TransportError
from src.exchange_rates.model.quote import TickerQuote

logger = logging.getLogger(__name__)

# Anything that can take a URL and return an async context manager yielding
# a connection with send(), close() and async iteration over frames
ConnectFactory = Callable[[str], Any]


class CoinbaseTickerCollector:
    """
    Collects the latest ticker price for each requested product.

    Each call to `collect`:
    - Opens exactly one WebSocket connection and sends one subscribe frame
    - Handles frames one at a time, discarding anything that is not a ticker
    - Keeps the last price seen per product until every product has one
    - Closes the connection before returning or raising

    There is no timeout. If a product never reports, `collect` keeps waiting;
    callers that need a bound can wrap it in `asyncio.wait_for`.
    """

    def __init__(
        self,
        ws_url: str,
        connect: ConnectFactory | None = None,
    ) -> None:
        """
        Initialize the collector.

        Args:
            ws_url: Coinbase feed URL
            connect: Connection factory, `websockets.connect` by default

        """
        self.ws_url = ws_url
        self._connect = connect or websockets.connect
        self._state = CollectorState.IDLE

    @property
    def state(self) -> CollectorState:
        """Lifecycle state of the most recent collection."""
        return self._state

    async def collect(self, symbols: Iterable[str]) -> list[TickerQuote]:
        """
        Subscribe to the ticker channel and wait for every product to report.

        Args:
            symbols: Coinbase product IDs, e.g. ["BTC-GBP", "LINK-GBP"]

        Returns:
            One quote per product, in the order products first reported

        Raises:
            ValueError: If no product IDs are given
            TransportError: If the connection fails or closes before every
                product reported

        """
        product_ids = list(dict.fromkeys(symbols))
        if not product_ids:
            raise ValueError("At least one product ID is required")

        requested = set(product_ids)
        quotes: dict[str, TickerQuote] = {}

        self._state = CollectorState.CONNECTING
        logger.info(f"Connecting to {self.ws_url} for {product_ids}")

        try:
            async with self._connect(self.ws_url) as connection:
                request = CoinbaseSubscribeRequest(product_ids=product_ids)
                await connection.send(request.model_dump_json())
                self._state = CollectorState.SUBSCRIBED

                async for frame in connection:
                    self._state = CollectorState.COLLECTING

                    ticker = parse_ticker_frame(frame)
                    if ticker is None or ticker.product_id not in requested:
                        logger.debug(f"Ignoring frame: {frame!r}")
                        continue

                    quotes[ticker.product_id] = ticker.to_quote()

                    if len(quotes) == len(requested):
                        await connection.close()
                        break
        except (OSError, TimeoutError, WebSocketException) as e:
            raise TransportError(
                f"Coinbase feed connection failed: {e}",
                context={"url": self.ws_url},
            ) from e
        finally:
            self._state = CollectorState.CLOSED

        if len(quotes) != len(requested):
            missing = sorted(requested - quotes.keys())
            raise TransportError(
                f"Coinbase feed closed before all products reported: {missing}",
                context={"url": self.ws_url},
            )

        logger.info(f"Collected {len(quotes)} Coinbase tickers")
        return list(quotes.values())
