"""Twitch endpoint client.

Synchronous helpers around the Helix endpoints the bot needs (user lookup, follow
checks, custom channel points rewards, current user) and the legacy TMI chatters list.

Every public operation comes in two forms:

- ``*_result`` returns a :class:`HelixResult` that tells precondition failures,
  transport failures, unexpected statuses and malformed bodies apart.
- The plain form collapses the result into the value callers branch on
  (``False``, ``None``, ``0`` or ``[]`` on any failure) and never raises.

Twitch answers several "nothing here" lookups with error statuses, so failures are
only logged at DEBUG level.
"""

import logging
import time
from typing import Any, TypeVar
from urllib.parse import quote
from uuid import UUID

import httpx
from pydantic import BaseModel, ValidationError

from twitch_endpoints.core.config import (
    DEFAULT_TIMEOUT,
    HELIX_BASE,
    TMI_BASE,
    TwitchEndpointSettings,
    get_settings,
)
from twitch_endpoints.models import (
    ChannelPointRewardCreate,
    ChannelPointRewardUpdate,
    HelixResult,
    HypeTrainEvent,
    ResultStatus,
    TwitchUser,
)
from twitch_endpoints.models.responses import (
    ChattersResponse,
    CurrentUserResponse,
    FollowsResponse,
    RewardCreateResponse,
    UsersLookupResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

CUSTOM_REWARDS_PATH = "channel_points/custom_rewards"


def _has_token(token: str | None) -> bool:
    # Header values must be ASCII
    return bool(token and token.strip() and token.isascii())


def _normalize_login(channel_name: str | None) -> str:
    return (channel_name or "").strip().lower()


class TwitchEndpointClient:
    """Client for the Twitch endpoints used by the bot.

    Holds only read-only configuration. Each call opens its own ``httpx.Client``, so
    one instance can be shared between threads.
    """

    def __init__(
        self,
        client_id: str,
        *,
        helix_url: str = HELIX_BASE,
        tmi_url: str = TMI_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        if not client_id:
            raise ValueError("Twitch client_id is required")
        if not client_id.isascii():
            raise ValueError("Twitch client_id must be ASCII")

        self.client_id = client_id
        self.helix_url = helix_url.rstrip("/")
        self.tmi_url = tmi_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: TwitchEndpointSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> "TwitchEndpointClient":
        """Build a client from settings (environment / .env when omitted)."""
        settings = settings or get_settings()
        return cls(
            settings.client_id,
            helix_url=settings.helix_url,
            tmi_url=settings.tmi_url,
            timeout=settings.request_timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token.strip()}",
            "Client-ID": self.client_id,
            "Content-Type": "application/json",
        }

    def _send(
        self,
        method: str,
        url: str,
        token: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        expected_status: int = 200,
    ) -> HelixResult[bytes]:
        """Send one authenticated request and read its body.

        The only place headers and timeout are set. ``self.timeout`` bounds each
        phase (connect, write, every read) and also the whole exchange: a response
        still arriving after the deadline is dropped as a transport failure.
        """
        deadline = time.monotonic() + self.timeout
        try:
            with httpx.Client(
                timeout=httpx.Timeout(self.timeout), transport=self._transport
            ) as client:
                with client.stream(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._headers(token),
                ) as response:
                    if response.status_code != expected_status:
                        logger.debug(f"{method} {url} returned {response.status_code}")
                        return HelixResult.failure(
                            ResultStatus.HTTP_ERROR,
                            f"HTTP {response.status_code}",
                            status_code=response.status_code,
                        )

                    chunks: list[bytes] = []
                    for chunk in response.iter_bytes():
                        if time.monotonic() > deadline:
                            logger.debug(f"{method} {url} exceeded {self.timeout}s")
                            return HelixResult.failure(
                                ResultStatus.TRANSPORT_ERROR,
                                f"No complete response within {self.timeout}s",
                                status_code=response.status_code,
                            )
                        chunks.append(chunk)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {url} failed: {e!r}")
            return HelixResult.failure(ResultStatus.TRANSPORT_ERROR, str(e) or type(e).__name__)

        return HelixResult.success(b"".join(chunks), status_code=response.status_code)

    @staticmethod
    def _parse(sent: HelixResult[bytes], schema: type[M]) -> HelixResult[M]:
        """Validate a response body against its endpoint schema."""
        try:
            parsed = schema.model_validate_json(sent.value or b"")
        except ValidationError as e:
            logger.debug(f"Unexpected {schema.__name__} body: {e.error_count()} error(s)")
            return HelixResult.failure(
                ResultStatus.INVALID_RESPONSE,
                f"Invalid {schema.__name__}: {e.errors()[0]['msg']}",
                status_code=sent.status_code,
            )
        return HelixResult.success(parsed, status_code=sent.status_code)

    @staticmethod
    def _precondition(error: str) -> HelixResult[Any]:
        return HelixResult.failure(ResultStatus.PRECONDITION_FAILED, error)

    def _helix(self, path: str) -> str:
        return f"{self.helix_url}/{path}"

    # ------------------------------------------------------------------
    # Follows
    # ------------------------------------------------------------------

    def follow_status_result(
        self, token: str, channel_id: int, viewer_id: int
    ) -> HelixResult[bool]:
        if channel_id <= 0:
            return self._precondition("channel_id is not set")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send(
            "GET",
            self._helix("users/follows"),
            token,
            params={"from_id": viewer_id, "to_id": channel_id},
        )
        if not sent.ok or sent.value is None:
            return sent.propagate()

        parsed = self._parse(sent, FollowsResponse)
        if not parsed.ok or parsed.value is None:
            return parsed.propagate()

        # A missing total and a total of zero both mean "not following"
        return HelixResult.success(bool(parsed.value.total), status_code=parsed.status_code)

    def check_follow_status(self, token: str, channel_id: int, viewer_id: int) -> bool:
        """Check whether *viewer_id* follows *channel_id*."""
        return self.follow_status_result(token, channel_id, viewer_id).value_or(False)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def channel_id_result(self, channel_name: str, token: str) -> HelixResult[int]:
        login = _normalize_login(channel_name)
        if not login:
            return self._precondition("channel name is empty")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send("GET", self._helix("users"), token, params={"login": login})
        if not sent.ok or sent.value is None:
            return sent.propagate()

        parsed = self._parse(sent, UsersLookupResponse)
        if not parsed.ok or parsed.value is None:
            return parsed.propagate()

        if not parsed.value.data or parsed.value.data[0].id <= 0:
            return HelixResult.failure(
                ResultStatus.INVALID_RESPONSE,
                f"No user found for login {login}",
                status_code=parsed.status_code,
            )
        return HelixResult.success(parsed.value.data[0].id, status_code=parsed.status_code)

    def resolve_channel_id(self, channel_name: str, token: str) -> tuple[int, str]:
        """Resolve a channel name to its numeric id.

        Returns:
            Tuple of (channel_id, error_message). channel_id is 0 on failure; the
            error message is empty when there was nothing to look up.
        """
        result = self.channel_id_result(channel_name, token)
        if result.ok and result.value is not None:
            return result.value, ""
        if not _normalize_login(channel_name):
            return 0, ""
        return 0, f"Unable to get the channel ID for {channel_name}."

    def current_user_result(self, token: str | None) -> HelixResult[TwitchUser]:
        if token is None or not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send("GET", self._helix("users"), token)
        if not sent.ok or sent.value is None:
            return sent.propagate()

        parsed = self._parse(sent, CurrentUserResponse)
        if not parsed.ok or parsed.value is None:
            return parsed.propagate()

        if not parsed.value.data:
            return HelixResult.failure(
                ResultStatus.INVALID_RESPONSE,
                "No user in response",
                status_code=parsed.status_code,
            )
        return HelixResult.success(parsed.value.data[0], status_code=parsed.status_code)

    def fetch_current_user(self, token: str | None) -> TwitchUser | None:
        """Get the user that owns *token*."""
        return self.current_user_result(token).value

    # ------------------------------------------------------------------
    # Channel Points
    # ------------------------------------------------------------------

    def create_reward_result(
        self,
        token: str,
        channel_id: int,
        title: str,
        points_required: int,
        max_uses_allowed: int = 1,
    ) -> HelixResult[UUID]:
        if channel_id <= 0:
            return self._precondition("channel_id is not set")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")
        try:
            body = ChannelPointRewardCreate(
                title=title,
                cost=points_required,
                max_per_user_per_stream=max_uses_allowed,
            )
        except ValidationError as e:
            return self._precondition(f"Invalid reward: {e.errors()[0]['msg']}")

        sent = self._send(
            "POST",
            self._helix(CUSTOM_REWARDS_PATH),
            token,
            params={"broadcaster_id": channel_id},
            json=body.model_dump(mode="json"),
        )
        if not sent.ok or sent.value is None:
            return sent.propagate()

        parsed = self._parse(sent, RewardCreateResponse)
        if not parsed.ok or parsed.value is None:
            return parsed.propagate()

        if not parsed.value.data:
            return HelixResult.failure(
                ResultStatus.INVALID_RESPONSE,
                "No reward in response",
                status_code=parsed.status_code,
            )

        reward_id = parsed.value.data[0].id
        logger.info(f"Created reward '{title}' ({reward_id}) for broadcaster {channel_id}")
        return HelixResult.success(reward_id, status_code=parsed.status_code)

    def create_channel_point_reward(
        self,
        token: str,
        channel_id: int,
        title: str,
        points_required: int,
        max_uses_allowed: int = 1,
    ) -> UUID | None:
        """Create a custom reward and return the id Twitch assigned to it."""
        return self.create_reward_result(
            token, channel_id, title, points_required, max_uses_allowed
        ).value

    def update_reward_result(
        self, token: str, channel_id: int, reward_id: UUID, is_enabled: bool
    ) -> HelixResult[bool]:
        if channel_id <= 0:
            return self._precondition("channel_id is not set")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send(
            "PATCH",
            self._helix(CUSTOM_REWARDS_PATH),
            token,
            params={"broadcaster_id": channel_id, "id": str(reward_id)},
            json=ChannelPointRewardUpdate(is_enabled=is_enabled).model_dump(),
        )
        if not sent.ok:
            return sent.propagate()

        logger.info(f"Reward {reward_id} {'enabled' if is_enabled else 'disabled'}")
        return HelixResult.success(True, status_code=sent.status_code)

    def update_channel_point_reward_enabled(
        self, token: str, channel_id: int, reward_id: UUID, is_enabled: bool
    ) -> bool:
        """Enable or disable a custom reward."""
        return self.update_reward_result(token, channel_id, reward_id, is_enabled).value_or(
            False
        )

    def delete_reward_result(
        self, token: str, channel_id: int, reward_id: UUID
    ) -> HelixResult[bool]:
        if channel_id <= 0:
            return self._precondition("channel_id is not set")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send(
            "DELETE",
            self._helix(CUSTOM_REWARDS_PATH),
            token,
            params={"broadcaster_id": channel_id, "id": str(reward_id)},
            expected_status=204,
        )
        if not sent.ok:
            return sent.propagate()

        logger.info(f"Deleted reward {reward_id} for broadcaster {channel_id}")
        return HelixResult.success(True, status_code=sent.status_code)

    def delete_channel_point_reward(self, token: str, channel_id: int, reward_id: UUID) -> bool:
        """Delete a custom reward. Already-deleted rewards also return False."""
        return self.delete_reward_result(token, channel_id, reward_id).value_or(False)

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    def chatter_list_result(self, token: str, channel_name: str) -> HelixResult[list[str]]:
        """TMI chatters for *channel_name*.

        TMI does not check the token, but an empty or non-ASCII token is still a
        precondition failure here, the same as for every Helix call.
        """
        login = _normalize_login(channel_name)
        if not login:
            return self._precondition("channel name is empty")
        if not _has_token(token):
            return self._precondition("token is empty or not ASCII")

        sent = self._send(
            "GET",
            f"{self.tmi_url}/group/user/{quote(login, safe='')}/chatters",
            token,
        )
        if not sent.ok or sent.value is None:
            return sent.propagate()

        parsed = self._parse(sent, ChattersResponse)
        if not parsed.ok or parsed.value is None:
            return parsed.propagate()

        if parsed.value.chatters is None:
            return HelixResult.success([], status_code=parsed.status_code)
        return HelixResult.success(
            list(parsed.value.chatters.viewers), status_code=parsed.status_code
        )

    def fetch_chatter_list(self, token: str, channel_name: str) -> list[str]:
        """List viewer names present in *channel_name*'s chat, in Twitch's order."""
        return self.chatter_list_result(token, channel_name).value_or([])

    # ------------------------------------------------------------------
    # Hype Train
    # ------------------------------------------------------------------

    def hype_train_event_result(
        self, token: str, channel_id: int, auth_version: int
    ) -> HelixResult[HypeTrainEvent]:
        # GET /hypetrain/events was closed off by Twitch; see
        # https://discuss.dev.twitch.tv/t/get-hype-train-events-via-app-token/31727
        return HelixResult.failure(
            ResultStatus.UNAVAILABLE, "Hype train events are no longer available"
        )

    def fetch_hype_train_event(
        self, token: str, channel_id: int, auth_version: int
    ) -> HypeTrainEvent | None:
        """Always None. Kept so existing callers keep working."""
        return self.hype_train_event_result(token, channel_id, auth_version).value
