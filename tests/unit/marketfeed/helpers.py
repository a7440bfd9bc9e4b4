"""Test helpers for MEXC adapter tests."""

from typing import Any

from marketfeed.adapters.mexc.codec import PushDataMessage
from marketfeed.adapters.mexc.data import (
    PublicAggreBookTicker,
    PublicAggreDealItem,
    PublicAggreDeals,
    PushDataBody,
    PushDataEnvelope,
)

AGGRE_DEALS_CHANNEL = "spot@public.aggre.deals.v3.api.pb@100ms@BTCUSDT"
BOOK_TICKER_CHANNEL = "spot@public.aggre.bookTicker.v3.api.pb@100ms@BTCUSDT"


class DealBuilder:
    """Builder for creating test aggregated deal items."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "price": "50000.50",
            "quantity": "0.001",
            "trade_type": 1,
            "time": 1609459200123,
        }

    def with_price(self, price: str) -> "DealBuilder":
        """Set the raw price string."""
        self._data["price"] = price
        return self

    def with_quantity(self, quantity: str) -> "DealBuilder":
        """Set the raw quantity string."""
        self._data["quantity"] = quantity
        return self

    def with_trade_type(self, trade_type: int) -> "DealBuilder":
        """Set the trade type code (1 buy, 2 sell)."""
        self._data["trade_type"] = trade_type
        return self

    def with_time(self, time_ms: int) -> "DealBuilder":
        """Set the trade time in epoch milliseconds."""
        self._data["time"] = time_ms
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw field data."""
        return dict(self._data)

    def build(self) -> PublicAggreDealItem:
        """Build as PublicAggreDealItem model."""
        return PublicAggreDealItem.model_validate(self._data)


class EnvelopeBuilder:
    """Builder for creating test push envelopes."""

    def __init__(self) -> None:
        """Initialize with an empty aggregated deals frame."""
        self._channel = AGGRE_DEALS_CHANNEL
        self._create_time: int | None = 1609459200200
        self._send_time: int | None = 1609459200250
        self._body: PushDataBody | None = None

    def with_channel(self, channel: str) -> "EnvelopeBuilder":
        """Set the channel topic."""
        self._channel = channel
        return self

    def with_times(
        self, create_time: int | None, send_time: int | None
    ) -> "EnvelopeBuilder":
        """Set create and send times (None for absent)."""
        self._create_time = create_time
        self._send_time = send_time
        return self

    def with_deals(self, *deals: DealBuilder) -> "EnvelopeBuilder":
        """Set an aggregated deals body."""
        self._body = PublicAggreDeals(
            deals=[deal.build() for deal in deals], event_type="DEALS"
        )
        return self

    def with_book_ticker(
        self,
        bid: tuple[str, str] = ("100", "1"),
        ask: tuple[str, str] = ("101", "2"),
    ) -> "EnvelopeBuilder":
        """Set an aggregated book ticker body from (price, quantity) pairs."""
        self._channel = BOOK_TICKER_CHANNEL
        self._body = PublicAggreBookTicker(
            bid_price=bid[0],
            bid_quantity=bid[1],
            ask_price=ask[0],
            ask_quantity=ask[1],
        )
        return self

    def with_body(self, body: PushDataBody | None) -> "EnvelopeBuilder":
        """Set any body variant."""
        self._body = body
        return self

    def build(self) -> PushDataEnvelope:
        """Build as PushDataEnvelope model."""
        return PushDataEnvelope(
            channel=self._channel,
            symbol="BTCUSDT",
            create_time=self._create_time,
            send_time=self._send_time,
            body=self._body,
        )


def _wire_bytes(value: str | bytes) -> bytes:
    return value if isinstance(value, bytes) else value.encode()


def encode_aggre_deals(
    channel: str, deals: list[dict[str, Any]], send_time: int | None = None
) -> bytes:
    """
    Encode an aggregated deals frame as MEXC would push it.

    Args:
        channel: Topic echoed in the frame
        deals: Deal field dicts as produced by DealBuilder.build_json; price
            and quantity may be raw bytes
        send_time: Optional send time in epoch milliseconds

    Returns:
        Serialized protobuf bytes
    """
    message: Any = PushDataMessage()
    message.channel = channel
    message.symbol = "BTCUSDT"
    if send_time is not None:
        message.send_time = send_time
    message.public_aggre_deals.event_type = "DEALS"
    for deal in deals:
        item = message.public_aggre_deals.deals.add()
        item.price = _wire_bytes(deal["price"])
        item.quantity = _wire_bytes(deal["quantity"])
        item.trade_type = deal["trade_type"]
        item.time = deal["time"]
    return message.SerializeToString()
