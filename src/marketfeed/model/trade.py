"""
Public trade domain model.

This model represents trade execution data in the domain layer, independent of any
specific exchange implementation. Exchange-specific deal formats are transformed
into this model at the adapter boundary.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from marketfeed.enums import Side


class PublicTrade(BaseModel):
    """
    Normalized public trade.

    The model is frozen for immutability and thread safety.
    """

    id: str = Field(description="Trade identifier derived from exchange data")
    price: Decimal = Field(description="Executed trade price")
    amount: Decimal = Field(description="Trade size in base currency")
    side: Side = Field(description="Trade side (BUY or SELL)")

    model_config = ConfigDict(frozen=True)

    @field_validator("price", "amount")
    @classmethod
    def validate_finite_non_negative(cls, v: Decimal) -> Decimal:
        """Ensure price and amount are finite and non-negative."""
        if not v.is_finite() or v < 0:
            raise ValueError("Price and amount must be finite and non-negative")
        return v

    @property
    def value(self) -> Decimal:
        """Calculate trade value (price * amount)."""
        return self.price * self.amount

    @property
    def is_buy(self) -> bool:
        """Check if this is a buy trade."""
        return self.side == Side.BUY
