"""Data models for the Twitch endpoint client."""

from .hype_train import HypeTrainContribution, HypeTrainEvent, HypeTrainEventData
from .result import HelixResult, ResultStatus
from .reward import ChannelPointRewardCreate, ChannelPointRewardUpdate
from .user import TwitchUser

__all__ = [
    "ChannelPointRewardCreate",
    "ChannelPointRewardUpdate",
    "HelixResult",
    "HypeTrainContribution",
    "HypeTrainEvent",
    "HypeTrainEventData",
    "ResultStatus",
    "TwitchUser",
]
