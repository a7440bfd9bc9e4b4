"""
Top-of-book domain model.

Level-1 order book state: the best bid and best ask as of the last update.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Level(BaseModel):
    """A single price level with price and amount."""

    price: Decimal
    amount: Decimal

    model_config = ConfigDict(frozen=True)

    @field_validator("price", "amount")
    @classmethod
    def validate_finite_non_negative(cls, v: Decimal) -> Decimal:
        """Ensure price and amount are finite and non-negative."""
        if not v.is_finite() or v < 0:
            raise ValueError("Price and amount must be finite and non-negative")
        return v


class OrderBookL1(BaseModel):
    """
    Normalized level-1 order book.

    Either side may be absent when the venue reports no resting liquidity.
    """

    last_update_time: datetime
    best_bid: Level | None = Field(default=None)
    best_ask: Level | None = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @property
    def mid_price(self) -> Decimal | None:
        """
        Get mid price between best bid and ask.

        Calculated as (best_bid + best_ask) / 2 or None if either side is empty.
        """
        if self.best_bid is None or self.best_ask is None:
            return None
        return (self.best_bid.price + self.best_ask.price) / 2

    @property
    def spread(self) -> Decimal | None:
        """Get spread between best bid and ask."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask.price - self.best_bid.price
