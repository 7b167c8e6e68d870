"""
Tests for the twitch-endpoints command line
"""
import json

import pytest

from twitch_endpoints.cli import EXIT_EMPTY, EXIT_OK, EXIT_USAGE, main

from .conftest import TOKEN, respond

REWARD_ID = "9c4c3a4e-8c1b-4b1e-9d1a-2f6e7c3b5a10"


class TestCommands:
    """Commands dispatched to an injected client"""

    def test_whoami(self, make_client, capsys):
        user = {"id": "7", "login": "streambot", "display_name": "StreamBot"}
        client = make_client(respond(json={"data": [user]}))
        assert main(["--token", TOKEN, "whoami"], client=client) == EXIT_OK
        assert "StreamBot (streambot) id=7" in capsys.readouterr().out

    def test_resolve(self, make_client, capsys):
        client = make_client(respond(json={"data": [{"id": 42}]}))
        assert main(["--token", TOKEN, "resolve", "somechannel"], client=client) == EXIT_OK
        assert capsys.readouterr().out.strip() == "42"

    def test_resolve_failure(self, make_client, capsys):
        client = make_client(respond(404))
        assert main(["--token", TOKEN, "resolve", "somechannel"], client=client) == EXIT_EMPTY
        assert "Unable to get the channel ID for somechannel." in capsys.readouterr().err

    def test_follows(self, make_client):
        client = make_client(respond(json={"total": 0}))
        assert main(["--token", TOKEN, "follows", "100", "200"], client=client) == EXIT_EMPTY

    def test_chatters(self, make_client, capsys):
        client = make_client(respond(json={"chatters": {"viewers": ["zed", "amy"]}}))
        assert main(["--token", TOKEN, "chatters", "somechannel"], client=client) == EXIT_OK
        assert capsys.readouterr().out.split() == ["zed", "amy"]

    def test_reward_create(self, make_client, sent_requests, capsys):
        client = make_client(respond(json={"data": [{"id": REWARD_ID}]}))
        argv = [
            "--token", TOKEN, "reward", "create", "100", "Hydrate", "500", "--max-per-stream", "2"
        ]

        assert main(argv, client=client) == EXIT_OK
        assert capsys.readouterr().out.strip() == REWARD_ID
        assert json.loads(sent_requests[0].content)["max_per_user_per_stream"] == 2

    @pytest.mark.parametrize("action,enabled", [("enable", True), ("disable", False)])
    def test_reward_toggle(self, make_client, sent_requests, action, enabled):
        client = make_client(respond(json={"data": []}))
        argv = ["--token", TOKEN, "reward", action, "100", REWARD_ID]
        assert main(argv, client=client) == EXIT_OK
        assert json.loads(sent_requests[0].content) == {"is_enabled": enabled}

    def test_reward_delete(self, make_client, sent_requests):
        client = make_client(respond(204))
        argv = ["--token", TOKEN, "reward", "delete", "100", REWARD_ID]
        assert main(argv, client=client) == EXIT_OK
        assert sent_requests[0].method == "DELETE"

    def test_reward_delete_failure(self, make_client):
        client = make_client(respond(404))
        argv = ["--token", TOKEN, "reward", "delete", "100", REWARD_ID]
        assert main(argv, client=client) == EXIT_EMPTY


class TestUsage:
    """Usage and configuration errors"""

    def test_missing_token(self, offline_client, sent_requests):
        assert main(["resolve", "somechannel"], client=offline_client) == EXIT_USAGE
        assert sent_requests == []

    def test_invalid_reward_id(self, offline_client):
        with pytest.raises(SystemExit) as exc:
            main(["--token", TOKEN, "reward", "delete", "100", "nope"], client=offline_client)
        assert exc.value.code == EXIT_USAGE

    def test_missing_client_id(self, monkeypatch, tmp_path, capsys):
        monkeypatch.delenv("TWITCH_CLIENT_ID", raising=False)
        monkeypatch.chdir(tmp_path)
        assert main(["--token", TOKEN, "whoami"]) == EXIT_USAGE
        assert "Invalid configuration" in capsys.readouterr().err

    def test_settings_client(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client")
        monkeypatch.setenv("TWITCH_TOKEN", "")
        monkeypatch.chdir(tmp_path)
        # No token anywhere: stops before any request is built
        assert main(["whoami"]) == EXIT_USAGE
