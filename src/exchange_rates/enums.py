"""
Enums for the exchange rates service.

This module defines the standardized enum values used to label data sources
and to expose the lifecycle of a streaming collection.

"""

from __future__ import annotations

import enum

# =============================================================================
# DATA SOURCE ENUMS
# =============================================================================


class Exchange(str, enum.Enum):
    """
    Exchange labels as they appear in the output table.

    The values are the display names written to the first CSV column, so
    their natural string order also drives the row ordering.
    """

    BINANCE = "Binance"
    COINBASE = "Coinbase"


# =============================================================================
# STREAMING LIFECYCLE ENUMS
# =============================================================================


class CollectorState(str, enum.Enum):
    """
    Lifecycle states of a streaming ticker collection.

    A collection moves strictly forward through these states:
    CONNECTING -> SUBSCRIBED -> COLLECTING -> CLOSED.
    """

    IDLE = "idle"  # No collection has started yet
    CONNECTING = "connecting"  # Opening the WebSocket
    SUBSCRIBED = "subscribed"  # Subscribe frame sent, nothing received yet
    COLLECTING = "collecting"  # Receiving frames
    CLOSED = "closed"  # Connection torn down (success or failure)
