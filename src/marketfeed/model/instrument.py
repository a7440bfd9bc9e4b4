"""
Instrument and subscription models.

A Subscription is the exchange-agnostic intent to receive one kind of data for
one instrument; connectors derive their wire identifiers from it.
"""

from pydantic import BaseModel, ConfigDict, Field

from marketfeed.enums import ExchangeId, InstrumentKind, SubKind


class MarketDataInstrument(BaseModel):
    """A tradable pair named by its base and quote assets."""

    base: str = Field(min_length=1)
    quote: str = Field(min_length=1)
    kind: InstrumentKind = InstrumentKind.SPOT

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.base}_{self.quote}"


class Subscription(BaseModel):
    """Intent to stream one kind of market data for one instrument."""

    exchange: ExchangeId
    instrument: MarketDataInstrument
    kind: SubKind

    model_config = ConfigDict(frozen=True)
