"""
Binance REST ticker price Pydantic models.

The `/api/v3/ticker/price` endpoint returns every tradable symbol in one JSON
array. The whole array is validated at once: one malformed element rejects
the entire response.
"""

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter


class BinanceTickerPrice(BaseModel):
    """A single `{symbol, price}` record from the ticker price endpoint."""

    symbol: StrictStr
    price: StrictStr

    model_config = ConfigDict(extra="ignore")


BinanceTickerPriceList = TypeAdapter(list[BinanceTickerPrice])


def parse_ticker_prices(body: str | bytes) -> list[BinanceTickerPrice]:
    """
    Validate a full response body.

    Raises:
        pydantic.ValidationError: If the body is not JSON, not an array, or
            any element lacks a string `symbol` or `price`

    """
    return BinanceTickerPriceList.validate_json(body)
