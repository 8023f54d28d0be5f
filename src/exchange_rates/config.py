"""
Exchange rates configuration using Pydantic Settings.

This module provides configuration management for the exchange rates service.
Defaults describe the fixed set of tracked markets; environment variables
may override them with type validation.
"""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Market identifiers are never blank
Symbol = Annotated[str, Field(min_length=1)]


class CoinbaseConfig(BaseSettings):
    """Coinbase streaming feed configuration."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_RATES_COINBASE_")

    ws_url: str = "wss://ws-feed.exchange.coinbase.com"
    product_ids: list[Symbol] = Field(
        default_factory=lambda: ["XTZ-GBP", "LINK-GBP", "BTC-GBP"],
        min_length=1,
        description="Coinbase product IDs to collect tickers for",
    )


class BinanceConfig(BaseSettings):
    """Binance snapshot endpoint configuration."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_RATES_BINANCE_")

    api_url: str = "https://api.binance.com"
    ticker_price_path: str = "/api/v3/ticker/price"
    request_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="HTTP client timeout in seconds",
    )

    # Binance symbols renamed to the Coinbase style, e.g. ADABTC -> ADA-BTC
    symbol_remap: list[tuple[Symbol, Symbol]] = Field(
        default_factory=lambda: [("ADABTC", "ADA-BTC"), ("DOTBTC", "DOT-BTC")],
        description="Ordered (binance_symbol, output_symbol) pairs",
    )


class ExchangeRatesConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="EXCHANGE_RATES_")

    # Sub-configurations
    coinbase: CoinbaseConfig = Field(default_factory=CoinbaseConfig)
    binance: BinanceConfig = Field(default_factory=BinanceConfig)

    # Global settings
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @classmethod
    def from_env(cls) -> "ExchangeRatesConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured ExchangeRatesConfig instance

        """
        return cls(
            coinbase=CoinbaseConfig(),
            binance=BinanceConfig(),
        )
