"""
============================

Exchange Price Adapters.

============================

This package contains adapter implementations for the supported exchanges.
Adapters translate exchange-specific payloads into TickerQuote models and
satisfy the source protocols defined in the protocols package.

"""
