"""
Classified adapter errors.

Mappers return these as values alongside successful events so one bad item
never discards its siblings. Builders and codecs raise them.
"""

from __future__ import annotations


class DataError(Exception):
    """Base class for every adapter-local failure."""


class ParseError(DataError):
    """A numeric field could not be parsed as a decimal."""

    def __init__(self, field: str, raw_value: str, cause: Exception) -> None:
        self.field = field
        self.raw_value = raw_value
        self.cause = cause
        super().__init__(f"Failed to parse {field}: {raw_value!r}, error: {cause}")


class UnsupportedValueError(DataError):
    """An integer code falls outside the known enumeration."""

    def __init__(self, field: str, raw_value: int) -> None:
        self.field = field
        self.raw_value = raw_value
        super().__init__(f"Unsupported {field}: unknown value: {raw_value}")


class InvalidTimestampError(DataError):
    """A millisecond epoch value is negative or unrepresentable."""

    def __init__(self, raw_value: int, reason: str = "out of range") -> None:
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Invalid unix_epoch_ms ({reason}): {raw_value}")


class SubscriptionSerializationError(DataError):
    """An outbound subscription message could not be serialized."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Failed to serialize subscription request: {cause}")


class CodecError(DataError):
    """An inbound binary frame could not be decoded into an envelope."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"Failed to decode push data frame: {cause}")
