"""MEXC spot adapter."""

from marketfeed.adapters.mexc.channel import MexcChannel
from marketfeed.adapters.mexc.connector import Mexc
from marketfeed.adapters.mexc.market import mexc_market
from marketfeed.adapters.mexc.subscription import ExchangeSub, MexcSubResponse

__all__ = ["ExchangeSub", "Mexc", "MexcChannel", "MexcSubResponse", "mexc_market"]
