"""
MEXC aggregated book ticker to OrderBookL1 mapping.

Unlike deal batches, a ticker is all-or-nothing: if either side fails to parse
the whole ticker maps to a single error and no partial book is emitted.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from marketfeed.adapters.mexc.convert import ms_epoch_to_datetime, parse_decimal
from marketfeed.adapters.mexc.data import PublicAggreBookTicker, PushDataEnvelope
from marketfeed.enums import ExchangeId
from marketfeed.errors import DataError, InvalidTimestampError
from marketfeed.model.book import Level, OrderBookL1
from marketfeed.model.events import MarketEvent, MarketResult

logger = logging.getLogger(__name__)


def resolve_exchange_time(
    envelope: PushDataEnvelope, time_received: datetime
) -> datetime:
    """
    Pick the exchange time for a ticker.

    Tries send_time, then create_time; absent or invalid candidates are
    skipped. Falls back to the receipt time.
    """
    for name, candidate in (
        ("send_time", envelope.send_time),
        ("create_time", envelope.create_time),
    ):
        if candidate is None:
            continue
        try:
            return ms_epoch_to_datetime(candidate)
        except InvalidTimestampError as e:
            logger.debug(f"Ignoring {name} on {envelope.channel}: {e}")
    return time_received


def parse_level(side: str, price: str, quantity: str) -> Level | None:
    """
    Parse one side of the ticker.

    A side with both fields empty has no resting liquidity and yields None.

    Raises:
        ParseError: If either field is not a valid decimal

    """
    if not price and not quantity:
        return None
    return Level(
        price=parse_decimal(f"{side}_price", price),
        amount=parse_decimal(f"{side}_quantity", quantity),
    )


def transform_book_l1(
    exchange: ExchangeId,
    instrument: Any,
    envelope: PushDataEnvelope,
    time_received: datetime | None = None,
) -> list[MarketResult]:
    """
    Map a push envelope to a top-of-book result.

    Returns:
        An empty list for non-ticker bodies, otherwise exactly one event or
        exactly one error

    """
    if time_received is None:
        time_received = datetime.now(UTC)

    if not isinstance(envelope.body, PublicAggreBookTicker):
        return []
    ticker = envelope.body

    time_exchange = resolve_exchange_time(envelope, time_received)

    try:
        best_bid = parse_level("bid", ticker.bid_price, ticker.bid_quantity)
        best_ask = parse_level("ask", ticker.ask_price, ticker.ask_quantity)
    except DataError as error:
        logger.debug(f"[{exchange.value}] Dropping ticker for {instrument}: {error}")
        return [error]

    return [
        MarketEvent(
            time_exchange=time_exchange,
            time_received=time_received,
            exchange=exchange,
            instrument=instrument,
            kind=OrderBookL1(
                last_update_time=time_exchange,
                best_bid=best_bid,
                best_ask=best_ask,
            ),
        )
    ]
