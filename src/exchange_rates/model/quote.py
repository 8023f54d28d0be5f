"""
Quote and output row models.

Prices are carried as the exact strings the exchanges sent. Nothing in this
layer parses them into numbers, so no precision is lost between the wire and
the output table.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from src.exchange_rates.enums import Exchange

# Ordered (source_symbol, target_symbol) pairs used to rename snapshot symbols
SymbolRemap = Sequence[tuple[str, str]]


class TickerQuote(BaseModel):
    """A single market's latest price, immutable once constructed."""

    symbol: str = Field(..., min_length=1)
    price: str

    model_config = ConfigDict(frozen=True)


class AggregatedRow(BaseModel):
    """
    One line of the merged output table.

    Rows sort by their formatted CSV line, which puts them in exchange order
    first and market order second.
    """

    exchange: str
    symbol: str
    price: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_quote(cls, exchange: Exchange | str, quote: TickerQuote) -> "AggregatedRow":
        """Tag a quote with the exchange it came from."""
        label = exchange.value if isinstance(exchange, Exchange) else exchange
        return cls(exchange=label, symbol=quote.symbol, price=quote.price)

    def to_csv_line(self) -> str:
        """Format as `<exchange>,<symbol>,<price>` without a line terminator."""
        return f"{self.exchange},{self.symbol},{self.price}"
