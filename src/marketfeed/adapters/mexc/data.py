"""
MEXC push data Pydantic models.

This module models one decoded MEXC V3 push frame: a wrapper carrying routing
fields, optional exchange timestamps and exactly one body variant. The body is
a discriminated union tagged by `kind`; bodies the adapter does not model are
represented by OtherBody so new venue message kinds never break decoding.

Key design principles:
- Raw fields store exchange data as-is (numbers stay strings)
- Conversion to domain types happens in the mappers, never here
- Models are frozen; an envelope lives only for the call that decoded it
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class PublicDealItem(BaseModel):
    """One trade from the raw deals channel."""

    price: str
    quantity: str
    trade_type: int = Field(description="1 = buy, 2 = sell")
    time: int = Field(description="Trade time in unix epoch milliseconds")

    model_config = ConfigDict(frozen=True)


class PublicAggreDealItem(BaseModel):
    """One trade from the aggregated deals channel."""

    price: str
    quantity: str
    trade_type: int = Field(description="1 = buy, 2 = sell")
    time: int = Field(description="Trade time in unix epoch milliseconds")

    model_config = ConfigDict(frozen=True)


class PublicDeals(BaseModel):
    """Batch of raw deals."""

    kind: Literal["public_deals"] = "public_deals"
    deals: list[PublicDealItem] = Field(default_factory=list)
    event_type: str = ""

    model_config = ConfigDict(frozen=True)


class PublicAggreDeals(BaseModel):
    """Batch of aggregated deals."""

    kind: Literal["public_aggre_deals"] = "public_aggre_deals"
    deals: list[PublicAggreDealItem] = Field(default_factory=list)
    event_type: str = ""

    model_config = ConfigDict(frozen=True)


class PublicAggreBookTicker(BaseModel):
    """Aggregated best bid / best ask."""

    kind: Literal["public_aggre_book_ticker"] = "public_aggre_book_ticker"
    bid_price: str = ""
    bid_quantity: str = ""
    ask_price: str = ""
    ask_quantity: str = ""

    model_config = ConfigDict(frozen=True)


class PublicSpotKline(BaseModel):
    """Candle update. Decoded but not mapped to events."""

    kind: Literal["public_spot_kline"] = "public_spot_kline"
    interval: str = ""
    window_start: int = 0
    opening_price: str = ""
    closing_price: str = ""
    highest_price: str = ""
    lowest_price: str = ""
    volume: str = ""
    amount: str = ""
    window_end: int = 0

    model_config = ConfigDict(frozen=True)


class OtherBody(BaseModel):
    """Any body variant the adapter does not model."""

    kind: Literal["other"] = "other"
    tag: str | None = Field(default=None, description="Wire name of the variant")

    model_config = ConfigDict(frozen=True)


PushDataBody = Annotated[
    PublicDeals | PublicAggreDeals | PublicAggreBookTicker | PublicSpotKline | OtherBody,
    Field(discriminator="kind"),
]


class PushDataEnvelope(BaseModel):
    """
    One decoded MEXC push frame.

    The channel field echoes the subscription topic that produced the frame.
    """

    channel: str = ""
    symbol: str | None = None
    symbol_id: str | None = None
    create_time: int | None = Field(
        default=None, description="Exchange creation time in unix epoch ms"
    )
    send_time: int | None = Field(
        default=None, description="Exchange send time in unix epoch ms"
    )
    body: PushDataBody | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def subscription_id(self) -> str:
        """Get the topic this frame was pushed for."""
        return self.channel
