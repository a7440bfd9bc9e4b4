"""
============================

Market Data Exchange Adapters.

============================

This package contains connector implementations for cryptocurrency exchanges.
Connectors translate exchange-specific wire formats into domain models and satisfy
the ConnectorProtocol defined in the protocols package.

Connectors are registered statically below; there is no dynamic discovery.

"""

from marketfeed.adapters.mexc import Mexc
from marketfeed.enums import ExchangeId
from marketfeed.protocols import ConnectorProtocol

CONNECTORS: dict[ExchangeId, type[ConnectorProtocol]] = {
    ExchangeId.MEXC: Mexc,
}


def connector_for(exchange: ExchangeId) -> type[ConnectorProtocol]:
    """
    Look up the connector registered for an exchange.

    Raises:
        ValueError: If no connector is registered

    """
    try:
        return CONNECTORS[exchange]
    except KeyError:
        raise ValueError(f"Unsupported exchange: {exchange}") from None
