"""Configuration and logging for the Twitch endpoint client."""

from .config import DEFAULT_TIMEOUT, HELIX_BASE, TMI_BASE, TwitchEndpointSettings, get_settings

__all__ = [
    "DEFAULT_TIMEOUT",
    "HELIX_BASE",
    "TMI_BASE",
    "TwitchEndpointSettings",
    "get_settings",
]
