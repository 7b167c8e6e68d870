"""Twitch user profile as returned by ``GET /users``."""

from datetime import datetime

from pydantic import BaseModel


class TwitchUser(BaseModel):
    id: str
    login: str
    display_name: str
    type: str = ""
    broadcaster_type: str = ""
    description: str = ""
    profile_image_url: str = ""
    offline_image_url: str = ""
    view_count: int = 0
    # Only present when the token carries user:read:email
    email: str | None = None
    created_at: datetime | None = None
