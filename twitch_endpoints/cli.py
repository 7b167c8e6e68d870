"""Command-line access to the Twitch endpoint client.

Usage:
    twitch-endpoints whoami
    twitch-endpoints resolve <channel>
    twitch-endpoints follows <channel_id> <viewer_id>
    twitch-endpoints chatters <channel>
    twitch-endpoints reward create <channel_id> <title> <cost> [--max-per-stream N]
    twitch-endpoints reward enable|disable|delete <channel_id> <reward_id>

The user token comes from --token or TWITCH_TOKEN; the client id from --client-id
or TWITCH_CLIENT_ID.
"""

from __future__ import annotations

import argparse
import sys
from uuid import UUID

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from twitch_endpoints.core.config import TwitchEndpointSettings
from twitch_endpoints.core.logging import setup_logging
from twitch_endpoints.services import TwitchEndpointClient

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_USAGE = 2

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="twitch-endpoints",
        description="Query Twitch users, follows, chatters and custom rewards.",
    )
    parser.add_argument("--token", default=None, help="User access token (default: TWITCH_TOKEN)")
    parser.add_argument("--client-id", default=None, help="Client ID (default: TWITCH_CLIENT_ID)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("whoami", help="Show the user that owns the token")

    resolve = sub.add_parser("resolve", help="Resolve a channel name to its id")
    resolve.add_argument("channel")

    follows = sub.add_parser("follows", help="Check whether a viewer follows a channel")
    follows.add_argument("channel_id", type=int)
    follows.add_argument("viewer_id", type=int)

    chatters = sub.add_parser("chatters", help="List viewers in a channel's chat")
    chatters.add_argument("channel")

    reward = sub.add_parser("reward", help="Manage custom channel points rewards")
    reward_sub = reward.add_subparsers(dest="action", required=True)

    create = reward_sub.add_parser("create", help="Create a reward")
    create.add_argument("channel_id", type=int)
    create.add_argument("title")
    create.add_argument("cost", type=int)
    create.add_argument("--max-per-stream", type=int, default=1, dest="max_per_stream")

    for action in ("enable", "disable", "delete"):
        p = reward_sub.add_parser(action, help=f"{action.capitalize()} a reward")
        p.add_argument("channel_id", type=int)
        p.add_argument("reward_id", type=UUID)

    return parser


def _report(found: bool, message: str) -> int:
    if found:
        console.print(message, markup=False, highlight=False)
        return EXIT_OK
    err_console.print(f"[red]✗[/red] {escape(message)}")
    return EXIT_EMPTY


def run(args: argparse.Namespace, client: TwitchEndpointClient, token: str) -> int:
    """Dispatch a parsed command to the client."""
    if args.command == "whoami":
        user = client.fetch_current_user(token)
        if user is None:
            return _report(False, "Could not fetch the current user")
        return _report(True, f"{user.display_name} ({user.login}) id={user.id}")

    if args.command == "resolve":
        channel_id, error = client.resolve_channel_id(args.channel, token)
        if not channel_id:
            return _report(False, error or "Channel name is empty")
        return _report(True, str(channel_id))

    if args.command == "follows":
        following = client.check_follow_status(token, args.channel_id, args.viewer_id)
        if not following:
            return _report(False, f"{args.viewer_id} does not follow {args.channel_id}")
        return _report(True, f"{args.viewer_id} follows {args.channel_id}")

    if args.command == "chatters":
        names = client.fetch_chatter_list(token, args.channel)
        if not names:
            return _report(False, f"No chatters found for {args.channel}")
        return _report(True, "\n".join(names))

    # reward
    if args.action == "create":
        reward_id = client.create_channel_point_reward(
            token, args.channel_id, args.title, args.cost, args.max_per_stream
        )
        if reward_id is None:
            return _report(False, f"Could not create reward '{args.title}'")
        return _report(True, str(reward_id))

    if args.action == "delete":
        deleted = client.delete_channel_point_reward(token, args.channel_id, args.reward_id)
        if not deleted:
            return _report(False, f"Could not delete reward {args.reward_id}")
        return _report(True, f"Reward {args.reward_id} deleted")

    enabled = args.action == "enable"
    updated = client.update_channel_point_reward_enabled(
        token, args.channel_id, args.reward_id, enabled
    )
    if not updated:
        return _report(False, f"Could not {args.action} reward {args.reward_id}")
    return _report(True, f"Reward {args.reward_id} {args.action}d")


def main(argv: list[str] | None = None, client: TwitchEndpointClient | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    token = args.token or ""
    if client is None:
        overrides = {"client_id": args.client_id} if args.client_id else {}
        try:
            settings = TwitchEndpointSettings(**overrides)
        except ValidationError as e:
            reason = escape(e.errors()[0]["msg"])
            err_console.print(f"[red]✗[/red] Invalid configuration: {reason}")
            return EXIT_USAGE
        setup_logging(settings)
        client = TwitchEndpointClient.from_settings(settings)
        token = token or settings.token

    if not token.strip():
        err_console.print("[red]✗[/red] No token: pass --token or set TWITCH_TOKEN")
        return EXIT_USAGE

    return run(args, client, token)


if __name__ == "__main__":
    sys.exit(main())
