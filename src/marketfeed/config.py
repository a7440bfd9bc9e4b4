"""
Market feed configuration using Pydantic Settings.

This module provides configuration management for the feed adapters,
allowing environment-based configuration with type validation and defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from marketfeed.enums import MexcAggInterval


class MexcConfig(BaseSettings):
    """MEXC connector configuration."""

    model_config = SettingsConfigDict(env_prefix="MARKETFEED_MEXC_")

    # Connection settings
    ws_url: str = "wss://wbs.mexc.com/ws"

    # Subscription settings
    agg_interval: MexcAggInterval = Field(
        default=MexcAggInterval.MS100,
        description="Aggregation interval used in subscription topics",
    )

    # Heartbeat settings
    ping_interval_seconds: float = Field(
        default=10.0,
        gt=0.0,
        le=60.0,
        description="Seconds between keep-alive pings",
    )
    ping_payload: str = Field(
        default="ping",
        min_length=1,
        description="Text frame sent as keep-alive",
    )


class FeedConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="MARKETFEED_")

    # Sub-configurations
    mexc: MexcConfig = Field(default_factory=MexcConfig)

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured FeedConfig instance

        """
        return cls(mexc=MexcConfig())


# Global config instance
config = FeedConfig.from_env()
