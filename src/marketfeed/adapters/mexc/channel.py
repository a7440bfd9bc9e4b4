"""
MEXC channel identifiers.

Each channel is the base string of a subscription topic. The actual topic sent
to MEXC is built by appending "@<interval>@<market>" to it, for example
"spot@public.aggre.deals.v3.api.pb@100ms@BTCUSDT".

Both channels push Protocol Buffers frames.
"""

from __future__ import annotations

import enum

from marketfeed.enums import SubKind


class MexcChannel(str, enum.Enum):
    """Fixed MEXC public channels, one per supported subscription kind."""

    AGGREGATED_TRADES = "spot@public.aggre.deals.v3.api.pb"
    AGGREGATED_BOOK_TICKER = "spot@public.aggre.bookTicker.v3.api.pb"

    @classmethod
    def for_kind(cls, kind: SubKind) -> MexcChannel:
        """Select the channel serving a subscription kind."""
        match kind:
            case SubKind.PUBLIC_TRADES:
                return cls.AGGREGATED_TRADES
            case SubKind.ORDER_BOOKS_L1:
                return cls.AGGREGATED_BOOK_TICKER
        raise ValueError(f"Unsupported subscription kind for MEXC: {kind}")
