"""LabelHandler: lets users change issue labels through comment commands.

Labels are checked against the permission policy; the bot never creates
labels that do not exist on the repository. A successful command produces no
feedback beyond the label change itself, to keep notification noise down.
"""

import logging
import os
from typing import Callable, Optional

from labelbot.commands.exceptions import CommandParseError
from labelbot.commands.models import LabelCommand
from labelbot.commands.parser import CommandParser, LabelCommandParser
from labelbot.dispatch.registry import Handler
from labelbot.events.models import Event, Issue, IssueCommentEvent, User
from labelbot.permissions.models import MembershipCheck
from labelbot.permissions.policy import DEFAULT_TEAM_NAME, authorize
from labelbot.tracker.tracker import IssueTracker

from .exceptions import LabelCommandError
from .models import LabelUpdateResult, LabelUpdateStatus
from .reporter import (
    ErrorReporter,
    parse_error_message,
    unknown_labels_message,
)
from .resolver import resolve_deltas

logger = logging.getLogger(__name__)

MembershipErrorHook = Callable[[User, MembershipCheck], None]


def log_membership_error(user: User, check: MembershipCheck) -> None:
    """Default hook for failed membership checks: a warning log line."""
    logger.warning(
        "Failed to check team membership for %s: %s; assuming not a member",
        user.login,
        check.error,
    )


class LabelHandler(Handler):
    """Applies ``@bot label`` commands from issue comments.

    Every delta in a command is authorized before anything is changed; one
    denied delta rejects the whole command with a single error comment.
    """

    name = "label"

    def __init__(
        self,
        tracker: IssueTracker,
        parser: Optional[CommandParser] = None,
        team_name: Optional[str] = None,
        on_membership_error: Optional[MembershipErrorHook] = None,
    ):
        """Initialize the LabelHandler.

        Args:
            tracker: Issue tracker used for membership checks, label
                updates and error comments.
            parser: Label command parser. LabelCommandParser if not provided.
            team_name: Team named in denial messages.
                Defaults to LABELBOT_TEAM_NAME env var, then "Rust".
            on_membership_error: Called when a membership check fails, before
                the user is treated as a non-member. Logs a warning if not
                provided.
        """
        self._tracker = tracker
        self._parser = parser
        self._team_name = team_name or os.getenv("LABELBOT_TEAM_NAME", DEFAULT_TEAM_NAME)
        self._on_membership_error = on_membership_error or log_membership_error
        self._reporter = ErrorReporter(tracker)

    def _get_parser(self) -> CommandParser:
        if self._parser is None:
            self._parser = LabelCommandParser()
        return self._parser

    def _interpret(self, event: IssueCommentEvent) -> Optional[LabelCommand]:
        """Parse the comment, reporting malformed commands to the user.

        Raises:
            LabelCommandError: After the parse error comment is posted.
        """
        issue = event.issue
        try:
            return self._get_parser().parse_label_command(
                event.comment.body, self._tracker.username
            )
        except CommandParseError as e:
            self._reporter.report(issue, parse_error_message(event.comment.html_url, e))
            raise LabelCommandError(
                issue.repository.full_name, issue.number, str(e)
            ) from e

    def _unknown_additions(self, issue: Issue, names: list[str]) -> list[str]:
        """Names being added that the repository does not define.

        Setting an undefined label would create it, so these block the update.
        """
        current = set(issue.label_names())
        added = [name for name in names if name not in current]
        if not added:
            return []
        known = self._tracker.repository_labels(issue.repository)
        return [name for name in added if name not in known]

    def _check_membership(self, user: User) -> MembershipCheck:
        check = self._tracker.check_membership(user)
        if check.failed_to_check:
            self._on_membership_error(user, check)
        return check

    def handle_event(self, event: Event) -> LabelUpdateResult:
        """Apply the label command in an issue comment, if there is one.

        Returns:
            LabelUpdateResult describing what happened. Permission denials
            are returned, not raised.

        Raises:
            LabelCommandError: If the comment holds a malformed label command.
            TrackerError: If updating labels or posting a comment fails.
        """
        if not isinstance(event, IssueCommentEvent):
            return LabelUpdateResult(status=LabelUpdateStatus.IGNORED)

        issue: Issue = event.issue
        if event.action == "deleted":
            return LabelUpdateResult(
                status=LabelUpdateStatus.IGNORED, issue_number=issue.number
            )

        command = self._interpret(event)
        if command is None:
            return LabelUpdateResult(
                status=LabelUpdateStatus.IGNORED, issue_number=issue.number
            )

        context = {"repository": issue.repository.full_name, "issue": issue.number}
        logger.info(
            "Label command from %s on %s#%d: %s",
            event.comment.user.login,
            issue.repository.full_name,
            issue.number,
            " ".join(str(d) for d in command.deltas),
            extra=context,
        )

        # The user cannot change mid-comment; check membership at most once.
        membership: Optional[MembershipCheck] = None
        for delta in command.deltas:
            if membership is None:
                membership = self._check_membership(event.comment.user)
            decision = authorize(delta.label.name, membership, self._team_name)
            if not decision.allowed:
                self._reporter.report(issue, decision.reason)
                return LabelUpdateResult(
                    status=LabelUpdateStatus.DENIED,
                    issue_number=issue.number,
                    denied_label=decision.label,
                    message=decision.reason,
                )

        labels, changed = resolve_deltas(issue.labels, command.deltas)
        names = [label.name for label in labels]
        if not changed:
            logger.debug("Labels already up to date", extra=context)
            return LabelUpdateResult(
                status=LabelUpdateStatus.NO_CHANGE,
                issue_number=issue.number,
                labels=names,
            )

        unknown = self._unknown_additions(issue, names)
        if unknown:
            message = unknown_labels_message(unknown)
            self._reporter.report(issue, message)
            return LabelUpdateResult(
                status=LabelUpdateStatus.UNKNOWN_LABELS,
                issue_number=issue.number,
                unknown_labels=unknown,
                message=message,
            )

        self._tracker.set_issue_labels(issue, labels)
        return LabelUpdateResult(
            status=LabelUpdateStatus.UPDATED,
            issue_number=issue.number,
            labels=names,
        )
