"""
Event models for market data streaming.

A MarketEvent wraps one normalized payload (trade, top-of-book) with the
exchange it came from, the caller's instrument key and both timestamps.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from marketfeed.enums import ExchangeId
from marketfeed.errors import DataError
from marketfeed.model.book import OrderBookL1
from marketfeed.model.trade import PublicTrade


class MarketEvent(BaseModel):
    """Normalized market data event."""

    time_exchange: datetime = Field(description="Exchange-side event time (UTC)")
    time_received: datetime = Field(description="Local receipt time (UTC)")
    exchange: ExchangeId
    instrument: Any = Field(description="Caller-supplied instrument key")
    kind: PublicTrade | OrderBookL1

    model_config = ConfigDict(frozen=True)

    def to_log_entry(self) -> str:
        """Generate a log-friendly representation."""
        return (
            f"[{self.exchange.value.upper()}] {self.instrument} "
            f"@ {self.time_exchange.isoformat()}"
        )


# Mapper output entry: either a normalized event or the classified failure
MarketResult = MarketEvent | DataError
