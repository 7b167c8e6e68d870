"""Hype train event models.

Twitch closed ``GET /hypetrain/events`` to app tokens, so the client never produces
these. They are kept so callers can keep their type annotations.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class HypeTrainContribution(BaseModel):
    total: int
    type: str
    user: str


class HypeTrainEventData(BaseModel):
    id: str
    broadcaster_id: str
    level: int
    total: int
    goal: int
    started_at: datetime
    expires_at: datetime
    cooldown_end_time: datetime
    last_contribution: HypeTrainContribution | None = None
    top_contributions: list[HypeTrainContribution] = Field(default_factory=list)


class HypeTrainEvent(BaseModel):
    id: str
    event_type: str
    event_timestamp: datetime
    version: str
    event_data: HypeTrainEventData
