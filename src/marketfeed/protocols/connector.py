"""
Connector Protocol Layer.

This module defines the contract every venue adapter fulfils to plug into a
streaming engine. The engine owns the transport, reconnection, liveness and
fan-in; a connector only supplies identity, handshake messages and a pure
mapping from decoded frames to normalized events.

Key design principles:
- Structural typing: connectors satisfy the protocol without inheriting from it
- Stateless: every member is a class-level, side-effect-free operation
- Errors as data: transform returns classified errors in place of events
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Sequence
from typing import Any, ClassVar, Protocol, runtime_checkable

from marketfeed.enums import ExchangeId, SubKind
from marketfeed.model.events import MarketResult
from marketfeed.model.ping import PingInterval


@runtime_checkable
class ConnectorProtocol(Protocol):
    """
    Protocol for a venue connector.

    Semantic Role: Venue wire grammar boundary
    Relationships:
    - Consumed by: the streaming engine, via the static registry
    - Produces: outbound control frames and normalized MarketEvents
    """

    ID: ClassVar[ExchangeId]

    @classmethod
    def url(cls) -> str:
        """
        Get the base websocket endpoint.

        Returns:
            Endpoint URL the engine connects to

        """
        ...

    @classmethod
    def ping_interval(cls) -> PingInterval | None:
        """
        Get the keep-alive descriptor.

        Returns:
            Cadence and payload for the engine to schedule, or None if the
            venue needs no application-level ping

        """
        ...

    @classmethod
    def requests(cls, exchange_subs: Sequence[Any]) -> list[str]:
        """
        Build subscription control frames.

        Args:
            exchange_subs: Ordered venue (channel, market) pairs

        Returns:
            Text frames to send; empty when there is nothing to subscribe

        """
        ...

    @classmethod
    def expected_responses(cls, subscriptions: Collection[Hashable]) -> int:
        """
        Count handshake acknowledgements to wait for.

        Args:
            subscriptions: Subscriptions sent in the handshake

        Returns:
            Number of distinct subscriptions

        """
        ...

    @classmethod
    def transform(
        cls,
        exchange: ExchangeId,
        instrument: Any,
        envelope: Any,
        kind: SubKind,
    ) -> list[MarketResult]:
        """
        Map one decoded frame to normalized results.

        Args:
            exchange: Exchange identity stamped on events
            instrument: Caller's instrument key stamped on events
            envelope: Decoded venue frame
            kind: Subscription kind selecting the normalized event type

        Returns:
            Ordered events and classified errors; empty for ignored frames

        """
        ...
