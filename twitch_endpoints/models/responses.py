"""Response schemas, one per consumed endpoint.

Only the fields the client reads are declared; anything else Twitch sends is ignored.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from .user import TwitchUser


class FollowsResponse(BaseModel):
    """``GET /users/follows``"""

    total: int | None = None


class UserIdEntry(BaseModel):
    id: int


class UsersLookupResponse(BaseModel):
    """``GET /users?login=...``"""

    data: list[UserIdEntry] = Field(default_factory=list)


class RewardIdEntry(BaseModel):
    id: UUID


class RewardCreateResponse(BaseModel):
    """``POST /channel_points/custom_rewards``"""

    data: list[RewardIdEntry] = Field(default_factory=list)


class CurrentUserResponse(BaseModel):
    """``GET /users`` without parameters"""

    data: list[TwitchUser] = Field(default_factory=list)


class ChatterGroups(BaseModel):
    viewers: list[str]


class ChattersResponse(BaseModel):
    """TMI ``GET /group/user/{channel}/chatters``"""

    chatters: ChatterGroups | None = None
