"""MEXC market identifiers."""

from marketfeed.model.instrument import MarketDataInstrument


def mexc_market(base: str, quote: str) -> str:
    """
    Build the MEXC symbol for a pair.

    MEXC symbols are the upper-cased concatenation of base and quote with no
    separator, e.g. ("eth", "usdt") -> "ETHUSDT".
    """
    return f"{base}{quote}".upper()


def market_for(instrument: MarketDataInstrument) -> str:
    """Build the MEXC symbol for an instrument."""
    return mexc_market(instrument.base, instrument.quote)
