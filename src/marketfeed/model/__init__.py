"""Market data models."""

from marketfeed.model.book import Level, OrderBookL1
from marketfeed.model.events import MarketEvent, MarketResult
from marketfeed.model.instrument import MarketDataInstrument, Subscription
from marketfeed.model.ping import PingInterval
from marketfeed.model.trade import PublicTrade

__all__ = [
    "Level",
    "MarketDataInstrument",
    "MarketEvent",
    "MarketResult",
    "OrderBookL1",
    "PingInterval",
    "PublicTrade",
    "Subscription",
]
