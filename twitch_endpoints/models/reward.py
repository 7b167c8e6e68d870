"""Request bodies for the custom channel points reward endpoints."""

from pydantic import BaseModel, Field, computed_field


class ChannelPointRewardCreate(BaseModel):
    """Body of ``POST /channel_points/custom_rewards``.

    Every reward created by the bot is limited per user per stream and skips the
    redemption request queue; neither flag can be changed by the caller.
    """

    title: str = Field(..., min_length=1, max_length=45)
    cost: int = Field(..., gt=0)
    max_per_user_per_stream: int = Field(default=1, gt=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_max_per_user_per_stream_enabled(self) -> bool:
        return True

    @computed_field  # type: ignore[prop-decorator]
    @property
    def should_redemptions_skip_request_queue(self) -> bool:
        return True


class ChannelPointRewardUpdate(BaseModel):
    """Body of ``PATCH /channel_points/custom_rewards``."""

    is_enabled: bool
