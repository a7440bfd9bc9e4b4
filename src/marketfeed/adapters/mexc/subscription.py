"""
MEXC control-channel models and request builder.

Outbound control messages are JSON text frames:

    {"method": "SUBSCRIPTION", "params": ["<channel>@<interval>@<market>", ...]}

The venue acknowledges each request with {"id": 0, "code": 0, "msg": "<topics>"}.
"""

import enum
import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticSerializationError

from marketfeed.adapters.mexc.channel import MexcChannel
from marketfeed.adapters.mexc.market import market_for
from marketfeed.enums import ExchangeId, MexcAggInterval, MexcWsMethod
from marketfeed.errors import SubscriptionSerializationError
from marketfeed.model.instrument import Subscription

logger = logging.getLogger(__name__)


class ExchangeSub(BaseModel):
    """A (channel, market) pair in MEXC's own vocabulary."""

    channel: str = Field(min_length=1)
    market: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("channel", mode="before")
    @classmethod
    def unwrap_channel(cls, v: object) -> object:
        """Accept MexcChannel members as their wire string."""
        if isinstance(v, enum.Enum):
            return v.value
        return v

    @classmethod
    def from_subscription(cls, subscription: Subscription) -> "ExchangeSub":
        """Derive the MEXC channel and market for a subscription."""
        if subscription.exchange != ExchangeId.MEXC:
            raise ValueError(f"Subscription is not for MEXC: {subscription.exchange}")
        return cls(
            channel=MexcChannel.for_kind(subscription.kind),
            market=market_for(subscription.instrument),
        )

    def topic(self, interval: MexcAggInterval) -> str:
        """
        Render the subscription topic.

        The same string is echoed back in the channel field of every push
        frame, so it doubles as the subscription id.
        """
        return f"{self.channel}@{interval.value}@{self.market}"


class MexcWsSub(BaseModel):
    """Outbound control message."""

    method: MexcWsMethod
    params: list[str]

    model_config = ConfigDict(frozen=True)


class MexcSubResponse(BaseModel):
    """Acknowledgement of a control message."""

    id: int = 0
    code: int
    msg: str = ""

    model_config = ConfigDict(extra="ignore")

    @property
    def is_success(self) -> bool:
        """Check whether the venue accepted the request."""
        return self.code == 0

    @property
    def topics(self) -> list[str]:
        """Get the acknowledged topics."""
        return [topic for topic in self.msg.split(",") if topic]


def build_control_frames(
    method: MexcWsMethod,
    exchange_subs: Sequence[ExchangeSub],
    interval: MexcAggInterval,
) -> list[str]:
    """
    Serialize a batch of subscriptions into outbound text frames.

    Args:
        method: Control method tag
        exchange_subs: Ordered (channel, market) pairs
        interval: Aggregation interval placed in every topic

    Returns:
        No frames for empty input, otherwise exactly one frame

    Raises:
        SubscriptionSerializationError: If the message cannot be serialized

    """
    if not exchange_subs:
        return []

    message = MexcWsSub(
        method=method,
        params=[sub.topic(interval) for sub in exchange_subs],
    )

    try:
        payload = message.model_dump_json()
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error(f"Failed to serialize MEXC {method.value} request: {e}")
        raise SubscriptionSerializationError(e) from e

    return [payload]
