"""Binance REST snapshot of current ticker prices."""

import logging

import httpx
from pydantic import ValidationError

from src.exchange_rates.adapters.binance.data import parse_ticker_prices
from src.exchange_rates.exceptions import ProtocolValidationError, TransportError
from src.exchange_rates.model.quote import SymbolRemap, TickerQuote

logger = logging.getLogger(__name__)


class BinancePriceFetcher:
    """Fetches Binance prices and renames them into the caller's symbols.

    Binance returns its whole symbol universe in one response. Only symbols
    named in the remap are kept, renamed to their target symbol, e.g.
    `ADABTC` becomes `ADA-BTC`.
    """

    def __init__(
        self,
        api_url: str,
        ticker_price_path: str = "/api/v3/ticker/price",
        request_timeout: float = 10.0,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.ticker_price_path = ticker_price_path
        self.request_timeout = request_timeout

    @property
    def url(self) -> str:
        return f"{self.api_url}{self.ticker_price_path}"

    async def fetch(self, remap: SymbolRemap) -> list[TickerQuote]:
        """Fetch all prices once and keep the ones named in `remap`.

        Args:
            remap: Ordered (binance_symbol, output_symbol) pairs. When a
                Binance symbol appears more than once, the first pair wins.

        Returns:
            Renamed quotes in response order.

        Raises:
            TransportError: Network failure or non-2xx status.
            ProtocolValidationError: Body is not a JSON array of
                `{symbol, price}` string records.
        """
        targets: dict[str, str] = {}
        for source_symbol, target_symbol in remap:
            targets.setdefault(source_symbol, target_symbol)

        body = await self._get()

        try:
            records = parse_ticker_prices(body)
        except ValidationError as e:
            raise ProtocolValidationError(
                "Invalid JSON response data",
                context={"url": self.url},
            ) from e

        quotes = [
            TickerQuote(symbol=targets[record.symbol], price=record.price)
            for record in records
            if record.symbol in targets
        ]
        logger.info(f"Matched {len(quotes)} of {len(records)} Binance symbols")
        return quotes

    async def _get(self) -> bytes:
        """Issue the single GET request and return the raw body."""
        logger.info(f"Requesting {self.url}")

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.request_timeout)
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Binance returned HTTP {e.response.status_code}",
                context={"url": self.url, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Binance request failed: {e}",
                context={"url": self.url},
            ) from e

        return response.content
