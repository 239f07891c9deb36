"""Posting explanatory error comments back to issues."""

import logging

from labelbot.events.models import Issue
from labelbot.tracker.tracker import IssueTracker

logger = logging.getLogger(__name__)

ERROR_FOOTER = (
    "Please let the maintainers of this bot know if you think this is a mistake."
)


def parse_error_message(comment_url: str, error: object) -> str:
    """Message for a label command the parser rejected."""
    return f"Parsing label command in [comment]({comment_url}) failed: {error}"


def unknown_labels_message(names: list[str]) -> str:
    """Message for added labels the repository does not define."""
    quoted = ", ".join(f"`{name}`" for name in names)
    noun = "Label" if len(names) == 1 else "Labels"
    verb = "does" if len(names) == 1 else "do"
    return (
        f"{noun} {quoted} {verb} not exist in this repository; "
        "the bot does not create new labels."
    )


class ErrorReporter:
    """Posts a single error comment explaining why a command was not applied."""

    def __init__(self, tracker: IssueTracker):
        self._tracker = tracker

    @staticmethod
    def format(message: str) -> str:
        return f"**Error**: {message}\n\n{ERROR_FOOTER}"

    def report(self, issue: Issue, message: str) -> None:
        """Post the error comment.

        Raises:
            TrackerError: If posting fails. Not retried.
        """
        logger.info(
            "Reporting error on %s#%d: %s",
            issue.repository.full_name,
            issue.number,
            message,
            extra={"repository": issue.repository.full_name, "issue": issue.number},
        )
        self._tracker.post_comment(issue, self.format(message))
