"""CLI entry point: handle one GitHub webhook delivery."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from labelbot.dispatch import EventDispatcher
from labelbot.events import EventError, load_event
from labelbot.handlers import LabelHandler
from labelbot.logging_config import configure_logging
from labelbot.tracker import GitHubClient, TrackerError

logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Apply label commands from a GitHub webhook event"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--event-name",
        default=os.getenv("GITHUB_EVENT_NAME"),
        help="Webhook event name, e.g. issue_comment (default: GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--event-path",
        default=os.getenv("GITHUB_EVENT_PATH"),
        help="Path to the webhook payload JSON (default: GITHUB_EVENT_PATH)",
    )
    args = parser.parse_args()
    configure_logging(level_override=args.log_level)

    if not args.event_name or not args.event_path:
        print(
            "ERROR: event name and payload path are required "
            "(--event-name/--event-path or GITHUB_EVENT_NAME/GITHUB_EVENT_PATH)",
            file=sys.stderr,
        )
        return 1

    try:
        event = load_event(args.event_name, args.event_path)
        client = GitHubClient()
        # Resolved once up front; handlers reuse the cached login.
        bot_name = client.username
    except (EventError, TrackerError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.debug("Acting as @%s", bot_name)
    dispatcher = EventDispatcher([LabelHandler(client)])
    result = dispatcher.dispatch(event)

    # Print summary
    print(f"\n--- Event '{result.event_name}' ---")
    for run in result.runs:
        status = "OK" if run.success else "FAILED"
        print(f"  {run.name}: {status} ({run.duration_seconds}s)")
        for key, value in run.details.items():
            print(f"    {key}: {value}")
        if run.error:
            print(f"    error: {run.error}")

    overall = "SUCCESS" if result.success else "FAILURE"
    print(f"\nResult: {overall}")

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
