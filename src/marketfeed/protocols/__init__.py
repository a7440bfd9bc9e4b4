"""Connector protocols."""

from marketfeed.protocols.connector import ConnectorProtocol

__all__ = ["ConnectorProtocol"]
