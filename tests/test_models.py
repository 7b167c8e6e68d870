"""
Tests for the data models (results, reward bodies, response schemas)
"""
from uuid import UUID

import pytest
from pydantic import ValidationError

from twitch_endpoints.models import (
    ChannelPointRewardCreate,
    ChannelPointRewardUpdate,
    HelixResult,
    ResultStatus,
)
from twitch_endpoints.models.responses import (
    ChattersResponse,
    FollowsResponse,
    RewardCreateResponse,
    UsersLookupResponse,
)


class TestHelixResult:
    """HelixResult collapsing"""

    def test_success(self):
        result = HelixResult.success(42, status_code=200)
        assert result.ok
        assert result.value_or(0) == 42

    def test_failure_collapses_to_default(self):
        result = HelixResult.failure(ResultStatus.HTTP_ERROR, "HTTP 404", status_code=404)
        assert not result.ok
        assert result.value is None
        assert result.value_or(False) is False

    def test_empty_success_is_kept(self):
        result = HelixResult.success([])
        assert result.value_or(["fallback"]) == []

    def test_propagate(self):
        original = HelixResult.failure(ResultStatus.TRANSPORT_ERROR, "timed out")
        carried = original.propagate()
        assert carried.status is ResultStatus.TRANSPORT_ERROR
        assert carried.error == "timed out"
        assert carried.status_code is None


class TestRewardBodies:
    """Custom reward request bodies"""

    def test_fixed_flags_are_serialized(self):
        body = ChannelPointRewardCreate(title="Hydrate", cost=100)
        assert body.model_dump() == {
            "title": "Hydrate",
            "cost": 100,
            "max_per_user_per_stream": 1,
            "is_max_per_user_per_stream_enabled": True,
            "should_redemptions_skip_request_queue": True,
        }

    @pytest.mark.parametrize("cost", [0, -5])
    def test_cost_must_be_positive(self, cost):
        with pytest.raises(ValidationError):
            ChannelPointRewardCreate(title="Hydrate", cost=cost)

    def test_update_body(self):
        assert ChannelPointRewardUpdate(is_enabled=False).model_dump() == {"is_enabled": False}


class TestResponseSchemas:
    """Per-endpoint response validation"""

    def test_follows_total_optional(self):
        assert FollowsResponse.model_validate({}).total is None

    def test_users_lookup_coerces_numeric_string(self):
        parsed = UsersLookupResponse.model_validate({"data": [{"id": "42"}]})
        assert parsed.data[0].id == 42

    def test_users_lookup_rejects_non_numeric_id(self):
        with pytest.raises(ValidationError):
            UsersLookupResponse.model_validate({"data": [{"id": "abc"}]})

    def test_reward_id_is_uuid(self):
        parsed = RewardCreateResponse.model_validate(
            {"data": [{"id": "9c4c3a4e-8c1b-4b1e-9d1a-2f6e7c3b5a10"}]}
        )
        assert parsed.data[0].id == UUID("9c4c3a4e-8c1b-4b1e-9d1a-2f6e7c3b5a10")

    def test_chatters_require_viewers(self):
        with pytest.raises(ValidationError):
            ChattersResponse.model_validate({"chatters": {"moderators": []}})
