"""
Coinbase Exchange WebSocket feed Pydantic models.

This module implements the two payload shapes exchanged with the Coinbase
ticker feed: the outbound subscribe request and the inbound ticker frame.

Key design principles:
- Inbound frames are validated against an explicit shape, never duck-typed
- Only fields this service uses are declared; everything else is ignored
- Prices stay strings, exactly as Coinbase sent them
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from src.exchange_rates.model.quote import TickerQuote


class CoinbaseSubscribeRequest(BaseModel):
    """Subscribe frame sent once right after the connection opens."""

    type: Literal["subscribe"] = "subscribe"
    product_ids: list[str]
    channels: list[str] = Field(default_factory=lambda: ["ticker"])


class CoinbaseTickerMessage(BaseModel):
    """
    Ticker frame from the `ticker` channel.

    Heartbeat, subscriptions and error frames fail validation on the `type`
    discriminator, so they never reach the collector's accumulation.
    """

    type: Literal["ticker"]
    product_id: StrictStr
    price: StrictStr

    model_config = ConfigDict(extra="ignore")

    def to_quote(self) -> TickerQuote:
        """Convert to the exchange-neutral quote."""
        return TickerQuote(symbol=self.product_id, price=self.price)


def parse_ticker_frame(frame: str | bytes) -> CoinbaseTickerMessage | None:
    """
    Validate a raw WebSocket frame as a ticker message.

    Args:
        frame: Raw frame as received from the connection

    Returns:
        The parsed ticker, or None for binary frames, non-JSON text and any
        JSON that is not a well-formed ticker

    """
    if not isinstance(frame, str):
        return None

    try:
        return CoinbaseTickerMessage.model_validate_json(frame)
    except ValidationError:
        return None
