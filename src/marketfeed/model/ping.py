"""Keep-alive descriptor handed to the transport."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class PingInterval(BaseModel):
    """
    Fixed heartbeat cadence and payload.

    Pure configuration data; the transport owning the socket schedules the sends.
    """

    interval: timedelta = Field(gt=timedelta(0))
    payload: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)
