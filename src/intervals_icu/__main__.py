"""
Command-line access to the Intervals.icu API.

Usage:
    python -m intervals_icu athlete
    python -m intervals_icu events --oldest 2024-01-01 --newest 2024-01-31
    python -m intervals_icu activity i12345678
    python -m intervals_icu --verbose wellness --oldest 2024-01-01

Credentials are read from INTERVALS_API_KEY (and optionally
INTERVALS_ATHLETE_ID, INTERVALS_BASE_URL, INTERVALS_TIMEOUT).
"""

import argparse
import json
import logging
import sys

from intervals_icu.client import IntervalsClient
from intervals_icu.errors import IntervalsAPIError

LIST_COMMANDS = {
    "events": "get_events",
    "wellness": "get_wellness",
    "workouts": "get_workouts",
    "activities": "get_activities",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intervals-icu",
        description="Intervals.icu API client - prints API responses as JSON",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log HTTP requests to stderr"
    )
    parser.add_argument(
        "--athlete",
        default=None,
        help="Athlete ID (default: INTERVALS_ATHLETE_ID or 'me')"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("athlete", help="Show the athlete profile")
    commands.add_parser("sport-settings", help="Show thresholds and zones per sport")

    for name in LIST_COMMANDS:
        sub = commands.add_parser(name, help=f"List {name}")
        sub.add_argument("--oldest", help="Oldest date (YYYY-MM-DD)")
        sub.add_argument("--newest", help="Newest date (YYYY-MM-DD)")
        sub.add_argument("--limit", type=int, help="Maximum number of results")

    activity = commands.add_parser("activity", help="Show one activity")
    activity.add_argument("activity_id")

    return parser


def run(client: IntervalsClient, args: argparse.Namespace):
    if args.command == "athlete":
        return client.get_athlete(args.athlete)
    if args.command == "sport-settings":
        return client.get_sport_settings(args.athlete)
    if args.command == "activity":
        return client.get_activity(args.activity_id, args.athlete)

    options = {
        key: value
        for key, value in (("oldest", args.oldest), ("newest", args.newest), ("limit", args.limit))
        if value is not None
    }
    return getattr(client, LIST_COMMANDS[args.command])(options, args.athlete)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        client = IntervalsClient.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    with client:
        try:
            result = run(client, args)
        except IntervalsAPIError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

        print(json.dumps(result, indent=2))
        remaining = client.get_rate_limit_remaining()
        if remaining is not None:
            reset = client.get_rate_limit_reset()
            print(
                f"Rate limit remaining: {remaining}"
                + (f" (resets {reset.isoformat()})" if reset else ""),
                file=sys.stderr,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
