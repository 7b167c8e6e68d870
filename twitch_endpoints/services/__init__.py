"""Services layer - Twitch endpoint access"""

from .twitch_endpoints import TwitchEndpointClient

__all__ = ["TwitchEndpointClient"]
