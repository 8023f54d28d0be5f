#!/usr/bin/env python3
"""Print current Coinbase and Binance prices as CSV."""

import sys

from src.exchange_rates.app import main

if __name__ == "__main__":
    sys.exit(main())
