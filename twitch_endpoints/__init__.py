"""Authenticated client for the Twitch endpoints used by the bot."""

from .core.config import TwitchEndpointSettings, get_settings
from .models import (
    ChannelPointRewardCreate,
    ChannelPointRewardUpdate,
    HelixResult,
    HypeTrainEvent,
    ResultStatus,
    TwitchUser,
)
from .services import TwitchEndpointClient

__version__ = "1.0.0"

__all__ = [
    "ChannelPointRewardCreate",
    "ChannelPointRewardUpdate",
    "HelixResult",
    "HypeTrainEvent",
    "ResultStatus",
    "TwitchEndpointClient",
    "TwitchEndpointSettings",
    "TwitchUser",
    "get_settings",
]
