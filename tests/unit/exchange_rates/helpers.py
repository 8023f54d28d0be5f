"""Test helpers for exchange rates tests."""

import asyncio
import json
from typing import Any


class TickerFrameBuilder:
    """Builder for Coinbase ticker frames as they arrive on the wire."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "type": "ticker",
            "sequence": 1,
            "product_id": "BTC-GBP",
            "price": "50000.00",
            "best_bid": "49999.00",
            "best_ask": "50001.00",
            "time": "2024-01-01T10:00:00.000000Z",
        }

    def with_symbol(self, symbol: str) -> "TickerFrameBuilder":
        """Set the product ID."""
        self._data["product_id"] = symbol
        return self

    def with_price(self, price: Any) -> "TickerFrameBuilder":
        """Set the price as-is, without converting it to a string."""
        self._data["price"] = price
        return self

    def with_type(self, message_type: str) -> "TickerFrameBuilder":
        """Set the message type discriminator."""
        self._data["type"] = message_type
        return self

    def without(self, field: str) -> "TickerFrameBuilder":
        """Drop a field."""
        self._data.pop(field, None)
        return self

    def build(self) -> str:
        """Serialize to a text frame."""
        return json.dumps(self._data)


def ticker_frame(symbol: str, price: str) -> str:
    """Shortcut for a valid ticker frame."""
    return TickerFrameBuilder().with_symbol(symbol).with_price(price).build()


HEARTBEAT_FRAME = json.dumps(
    {
        "type": "heartbeat",
        "sequence": 90,
        "last_trade_id": 20,
        "product_id": "BTC-GBP",
        "time": "2024-01-01T10:00:00.000000Z",
    }
)

SUBSCRIPTIONS_FRAME = json.dumps(
    {
        "type": "subscriptions",
        "channels": [{"name": "ticker", "product_ids": ["BTC-GBP"]}],
    }
)


class FakeConnection:
    """
    Fake WebSocket connection for testing without network calls.

    Mirrors the parts of a `websockets` client connection the collector uses:
    async context management, `send`, `close` and async iteration. Items in
    `frames` are delivered in order; an exception instance is raised instead
    of delivered. With `hang=True` the iterator waits forever once frames run
    out, like a feed that never sends the missing product.
    """

    def __init__(self, frames: list[Any], hang: bool = False) -> None:
        """Initialize with the frames to deliver."""
        self.frames = list(frames)
        self.hang = hang

        # Track state
        self.sent: list[str] = []
        self.delivered = 0
        self.close_calls = 0
        self.is_open = False

    async def __aenter__(self) -> "FakeConnection":
        self.is_open = True
        return self

    async def __aexit__(self, *exc: object) -> None:
        self.is_open = False

    async def send(self, message: str) -> None:
        """Record outbound frames."""
        self.sent.append(message)

    async def close(self) -> None:
        """Simulate closing the connection."""
        self.close_calls += 1
        self.is_open = False

    def __aiter__(self) -> Any:
        return self._iterate()

    async def _iterate(self) -> Any:
        for frame in self.frames:
            if not self.is_open:
                return
            if isinstance(frame, BaseException):
                self.is_open = False
                raise frame
            self.delivered += 1
            yield frame

        if self.hang:
            await asyncio.Event().wait()


class FakeConnect:
    """Connection factory standing in for `websockets.connect`."""

    def __init__(self, connection: FakeConnection) -> None:
        self.connection = connection
        self.urls: list[str] = []

    def __call__(self, url: str) -> FakeConnection:
        self.urls.append(url)
        return self.connection


class FailingConnect:
    """Connection factory whose handshake fails."""

    def __init__(self, error: BaseException) -> None:
        self.error = error

    def __call__(self, url: str) -> "FailingConnect":
        return self

    async def __aenter__(self) -> None:
        raise self.error

    async def __aexit__(self, *exc: object) -> None:
        return None
