"""Field conversions shared by the MEXC mappers."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal, InvalidOperation

from marketfeed.enums import MexcTradeType, Side
from marketfeed.errors import InvalidTimestampError, ParseError, UnsupportedValueError

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_decimal(field: str, raw: str) -> Decimal:
    """
    Parse a wire decimal string.

    Raises:
        ParseError: If raw is not a finite, non-negative decimal

    """
    try:
        value = Decimal(raw)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ParseError(field, raw, e) from e

    if not value.is_finite():
        raise ParseError(field, raw, ValueError("not a finite number"))
    if value < 0:
        raise ParseError(field, raw, ValueError("negative value"))
    return value


def side_from_trade_type(trade_type: int) -> Side:
    """
    Map a MEXC trade type code to a side.

    Raises:
        UnsupportedValueError: For any code other than 1 (buy) or 2 (sell)

    """
    try:
        return MexcTradeType(trade_type).side
    except ValueError as e:
        raise UnsupportedValueError("trade_type", trade_type) from e


def ms_epoch_to_datetime(ms: int) -> datetime:
    """
    Convert unix epoch milliseconds to an aware UTC datetime.

    Raises:
        InvalidTimestampError: If ms is negative or beyond datetime's range

    """
    if ms < 0:
        raise InvalidTimestampError(ms, "negative")
    try:
        return _EPOCH + timedelta(milliseconds=ms)
    except OverflowError as e:
        raise InvalidTimestampError(ms) from e
