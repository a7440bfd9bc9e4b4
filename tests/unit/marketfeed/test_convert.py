"""Tests for MEXC field conversions."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from marketfeed.adapters.mexc.convert import (
    ms_epoch_to_datetime,
    parse_decimal,
    side_from_trade_type,
)
from marketfeed.enums import Side
from marketfeed.errors import InvalidTimestampError, ParseError, UnsupportedValueError


class TestSideFromTradeType:
    """Test trade type to side mapping."""

    def test_known_codes(self) -> None:
        """Test 1 is buy and 2 is sell."""
        assert side_from_trade_type(1) == Side.BUY
        assert side_from_trade_type(2) == Side.SELL

    @pytest.mark.parametrize("code", [0, 3, -1, 100])
    def test_unknown_codes(self, code: int) -> None:
        """Test any other code is unsupported."""
        with pytest.raises(UnsupportedValueError) as exc_info:
            side_from_trade_type(code)

        assert exc_info.value.raw_value == code
        assert f"unknown value: {code}" in str(exc_info.value)


class TestMsEpochToDatetime:
    """Test millisecond epoch conversion."""

    def test_valid_value(self) -> None:
        """Test the result equals epoch plus the duration."""
        result = ms_epoch_to_datetime(1609459200000)

        assert result == datetime(2021, 1, 1, tzinfo=UTC)
        assert result.tzinfo is not None

    def test_millisecond_precision(self) -> None:
        """Test milliseconds are kept exactly."""
        expected = datetime(1970, 1, 1, tzinfo=UTC) + timedelta(milliseconds=1609459200123)
        assert ms_epoch_to_datetime(1609459200123) == expected

    def test_zero_is_epoch(self) -> None:
        """Test zero maps to the epoch itself."""
        assert ms_epoch_to_datetime(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_negative_rejected(self) -> None:
        """Test negative values are rejected with their own reason."""
        with pytest.raises(InvalidTimestampError) as exc_info:
            ms_epoch_to_datetime(-1)

        assert exc_info.value.raw_value == -1
        assert exc_info.value.reason == "negative"
        assert "(negative): -1" in str(exc_info.value)

    def test_out_of_range_rejected(self) -> None:
        """Test values beyond datetime's range are rejected."""
        with pytest.raises(InvalidTimestampError) as exc_info:
            ms_epoch_to_datetime(2**63 - 1)

        assert exc_info.value.reason == "out of range"


class TestParseDecimal:
    """Test wire decimal parsing."""

    def test_valid(self) -> None:
        """Test decimal strings keep their exact value."""
        assert parse_decimal("price", "50000.50") == Decimal("50000.50")
        assert parse_decimal("quantity", "0") == Decimal("0")

    @pytest.mark.parametrize("raw", ["", "abc", "1.2.3", "NaN", "Infinity", "-1"])
    def test_invalid(self, raw: str) -> None:
        """Test malformed, non-finite and negative strings are rejected."""
        with pytest.raises(ParseError) as exc_info:
            parse_decimal("price", raw)

        assert exc_info.value.field == "price"
        assert exc_info.value.raw_value == raw
        assert exc_info.value.cause is not None
