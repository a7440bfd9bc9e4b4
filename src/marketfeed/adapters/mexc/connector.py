"""
MEXC spot connector.

Public market data on MEXC V3 is subscribed over a JSON control channel and
pushed as Protocol Buffers frames. This connector satisfies ConnectorProtocol
through structure: it supplies the endpoint, the keep-alive descriptor, the
control frames and the frame-to-event mapping. Connection handling stays with
the engine.

Docs: https://mexcdevelop.github.io/apidocs/spot_v3_en/#websocket-market-data
"""

import logging
from collections.abc import Collection, Hashable, Sequence
from datetime import timedelta
from typing import Any, ClassVar

from marketfeed.adapters.mexc.book import transform_book_l1
from marketfeed.adapters.mexc.codec import decode_push_data
from marketfeed.adapters.mexc.data import PushDataEnvelope
from marketfeed.adapters.mexc.subscription import ExchangeSub, build_control_frames
from marketfeed.adapters.mexc.trade import transform_trades
from marketfeed.config import config
from marketfeed.enums import ExchangeId, MexcAggInterval, MexcWsMethod, SubKind
from marketfeed.model.events import MarketResult
from marketfeed.model.instrument import Subscription
from marketfeed.model.ping import PingInterval

logger = logging.getLogger(__name__)


class Mexc:
    """Connector for MEXC spot public streams."""

    ID: ClassVar[ExchangeId] = ExchangeId.MEXC

    @classmethod
    def url(cls) -> str:
        """Get the public websocket endpoint."""
        return config.mexc.ws_url

    @classmethod
    def ping_interval(cls) -> PingInterval:
        """Get the keep-alive descriptor: a text "ping" every 10 seconds."""
        return PingInterval(
            interval=timedelta(seconds=config.mexc.ping_interval_seconds),
            payload=config.mexc.ping_payload,
        )

    @classmethod
    def exchange_subs(cls, subscriptions: Sequence[Subscription]) -> list[ExchangeSub]:
        """Translate subscriptions into MEXC (channel, market) pairs."""
        return [ExchangeSub.from_subscription(sub) for sub in subscriptions]

    @classmethod
    def requests(
        cls,
        exchange_subs: Sequence[ExchangeSub],
        interval: MexcAggInterval | str | None = None,
    ) -> list[str]:
        """
        Build the subscription control frames.

        Args:
            exchange_subs: Ordered (channel, market) pairs
            interval: Aggregation interval; defaults to the configured one

        Returns:
            No frames for empty input, otherwise one SUBSCRIPTION frame

        Raises:
            SubscriptionSerializationError: If the frame cannot be serialized

        """
        frames = build_control_frames(
            MexcWsMethod.SUBSCRIPTION, exchange_subs, cls._interval(interval)
        )
        if frames:
            logger.info(f"[{cls.ID.value}] Subscribing to {len(exchange_subs)} topics")
        return frames

    @classmethod
    def unsubscribe_requests(
        cls,
        exchange_subs: Sequence[ExchangeSub],
        interval: MexcAggInterval | str | None = None,
    ) -> list[str]:
        """Build the control frames cancelling previously sent subscriptions."""
        return build_control_frames(
            MexcWsMethod.UNSUBSCRIPTION, exchange_subs, cls._interval(interval)
        )

    @classmethod
    def expected_responses(cls, subscriptions: Collection[Hashable]) -> int:
        """Count distinct subscriptions; MEXC acknowledges each one."""
        return len(set(subscriptions))

    @classmethod
    def subscription_id(cls, envelope: PushDataEnvelope) -> str:
        """Get the topic a push frame belongs to."""
        return envelope.subscription_id

    @staticmethod
    def decode(payload: bytes) -> PushDataEnvelope:
        """Decode a binary push frame."""
        return decode_push_data(payload)

    @classmethod
    def transform(
        cls,
        exchange: ExchangeId,
        instrument: Any,
        envelope: PushDataEnvelope,
        kind: SubKind = SubKind.PUBLIC_TRADES,
    ) -> list[MarketResult]:
        """
        Map a push envelope to normalized results for a subscription kind.

        Returns:
            Trade results (one per deal) or a single top-of-book result;
            empty when the body does not belong to the kind

        """
        match kind:
            case SubKind.PUBLIC_TRADES:
                return transform_trades(exchange, instrument, envelope)
            case SubKind.ORDER_BOOKS_L1:
                return transform_book_l1(exchange, instrument, envelope)
        raise ValueError(f"Unsupported subscription kind for MEXC: {kind}")

    @staticmethod
    def _interval(interval: MexcAggInterval | str | None) -> MexcAggInterval:
        if interval is None:
            return config.mexc.agg_interval
        return MexcAggInterval(interval)
