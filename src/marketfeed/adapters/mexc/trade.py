"""
MEXC deals to PublicTrade mapping.

Every deal item in a batch is mapped independently: a malformed item produces
a classified error in its slot and its siblings are still mapped.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from marketfeed.adapters.mexc.convert import (
    ms_epoch_to_datetime,
    parse_decimal,
    side_from_trade_type,
)
from marketfeed.adapters.mexc.data import (
    PublicAggreDealItem,
    PublicAggreDeals,
    PublicDealItem,
    PublicDeals,
    PushDataEnvelope,
)
from marketfeed.enums import ExchangeId
from marketfeed.errors import DataError
from marketfeed.model.events import MarketEvent, MarketResult
from marketfeed.model.trade import PublicTrade

logger = logging.getLogger(__name__)


def map_deal_item(
    exchange: ExchangeId,
    instrument: Any,
    item: PublicDealItem | PublicAggreDealItem,
    time_received: datetime,
) -> MarketResult:
    """
    Map one deal item to a trade event.

    Returns:
        The trade event, or the first classified error hit while converting

    """
    try:
        price = parse_decimal("price", item.price)
        amount = parse_decimal("quantity", item.quantity)
        side = side_from_trade_type(item.trade_type)
        time_exchange = ms_epoch_to_datetime(item.time)
    except DataError as error:
        logger.debug(f"[{exchange.value}] Skipping deal for {instrument}: {error}")
        return error

    return MarketEvent(
        time_exchange=time_exchange,
        time_received=time_received,
        exchange=exchange,
        instrument=instrument,
        kind=PublicTrade(
            id=str(item.time),
            price=price,
            amount=amount,
            side=side,
        ),
    )


def transform_trades(
    exchange: ExchangeId,
    instrument: Any,
    envelope: PushDataEnvelope,
    time_received: datetime | None = None,
) -> list[MarketResult]:
    """
    Map a push envelope to trade results.

    Bodies other than deal batches, including a missing body, yield an empty list.

    Args:
        exchange: Exchange the envelope came from
        instrument: Caller's instrument key, copied into every event
        envelope: Decoded push frame
        time_received: Receipt time; defaults to now (UTC)

    Returns:
        One result per deal item, in wire order

    """
    if time_received is None:
        time_received = datetime.now(UTC)

    match envelope.body:
        case PublicDeals(deals=deals) | PublicAggreDeals(deals=deals):
            return [
                map_deal_item(exchange, instrument, item, time_received)
                for item in deals
            ]
        case None:
            return []
        case body:
            logger.debug(
                f"[{exchange.value}] Ignoring {body.kind} body on {envelope.channel}"
            )
            return []
