"""Tests for exchange rates configuration."""

import pytest
from pydantic import ValidationError

from src.exchange_rates.config import (
    BinanceConfig,
    CoinbaseConfig,
    ExchangeRatesConfig,
)


class TestDefaults:
    """Defaults describe the fixed set of tracked markets."""

    def test_coinbase_products(self):
        config = CoinbaseConfig()

        assert config.product_ids == ["XTZ-GBP", "LINK-GBP", "BTC-GBP"]
        assert config.ws_url.startswith("wss://")

    def test_binance_remap(self):
        config = BinanceConfig()

        assert config.symbol_remap == [("ADABTC", "ADA-BTC"), ("DOTBTC", "DOT-BTC")]
        assert config.api_url == "https://api.binance.com"
        assert config.ticker_price_path == "/api/v3/ticker/price"

    def test_root_config(self):
        config = ExchangeRatesConfig.from_env()

        assert config.log_level == "WARNING"
        assert isinstance(config.coinbase, CoinbaseConfig)
        assert isinstance(config.binance, BinanceConfig)


class TestEnvironmentOverrides:
    """Environment variables override defaults with validation."""

    def test_product_ids_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EXCHANGE_RATES_COINBASE_PRODUCT_IDS", '["ETH-GBP"]')

        assert ExchangeRatesConfig.from_env().coinbase.product_ids == ["ETH-GBP"]

    def test_remap_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EXCHANGE_RATES_BINANCE_SYMBOL_REMAP", '[["ETHBTC", "ETH-BTC"]]')

        assert BinanceConfig().symbol_remap == [("ETHBTC", "ETH-BTC")]

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EXCHANGE_RATES_LOG_LEVEL", "DEBUG")

        assert ExchangeRatesConfig.from_env().log_level == "DEBUG"


class TestValidation:
    def test_empty_product_list_rejected(self):
        with pytest.raises(ValidationError):
            CoinbaseConfig(product_ids=[])

    def test_blank_product_id_rejected(self):
        with pytest.raises(ValidationError):
            CoinbaseConfig(product_ids=["BTC-GBP", ""])

    @pytest.mark.parametrize("pair", [("ADABTC", ""), ("", "ADA-BTC")])
    def test_blank_remap_symbol_rejected(self, pair: tuple[str, str]):
        with pytest.raises(ValidationError):
            BinanceConfig(symbol_remap=[pair])

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            ExchangeRatesConfig(log_level="VERBOSE")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            BinanceConfig(request_timeout=0)
