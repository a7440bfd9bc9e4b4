"""
Enums for the market feed.

This module defines the standardized enum values used throughout the feed.
These enums represent the semantic vocabulary of the domain and establish consistent
naming across exchanges and components.

"""

from __future__ import annotations

import enum

# =============================================================================
# MARKET STRUCTURE ENUMS
# =============================================================================


class ExchangeId(str, enum.Enum):
    """
    Supported exchange identifiers.

    These identifiers represent the exchanges integrated with the feed
    and are used for routing, filtering, and identifying data sources.
    """

    MEXC = "mexc"


class InstrumentKind(str, enum.Enum):
    """Kind of market data instrument."""

    SPOT = "spot"


class SubKind(str, enum.Enum):
    """
    Exchange-agnostic subscription kinds.

    Each kind selects one normalized event type produced by a connector
    and, per exchange, one fixed wire channel.
    """

    PUBLIC_TRADES = "public_trades"
    ORDER_BOOKS_L1 = "order_books_l1"


class Side(str, enum.Enum):
    """
    Standardized enum for trade sides.

    Represents the direction of a trade (buy or sell) in a
    consistent format across all exchanges.
    """

    BUY = "buy"  # Trade executed as a buy
    SELL = "sell"  # Trade executed as a sell


# =============================================================================
# MEXC WIRE ENUMS
# =============================================================================


class MexcAggInterval(str, enum.Enum):
    """
    Venue-side batching window for aggregated MEXC streams.

    The value is the literal used in subscription topics.
    """

    MS10 = "10ms"
    MS100 = "100ms"


class MexcWsMethod(str, enum.Enum):
    """Control-channel method tags understood by MEXC."""

    SUBSCRIPTION = "SUBSCRIPTION"
    UNSUBSCRIPTION = "UNSUBSCRIPTION"


class MexcTradeType(int, enum.Enum):
    """Integer trade type codes carried in MEXC deal items."""

    BUY = 1
    SELL = 2

    @property
    def side(self) -> Side:
        """Map the venue code to the standardized side."""
        return Side.BUY if self is MexcTradeType.BUY else Side.SELL
