"""Venue wire-protocol adapters producing normalized market data."""

from marketfeed.adapters import CONNECTORS, connector_for
from marketfeed.model import MarketEvent

__all__ = ["CONNECTORS", "MarketEvent", "connector_for"]
