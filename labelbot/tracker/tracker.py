"""Abstract interface for the issue tracker the bot acts on."""

from abc import ABC, abstractmethod

from labelbot.events.models import Issue, Label, Repository, User
from labelbot.permissions.models import MembershipCheck


class IssueTracker(ABC):
    """Network operations the label handler needs from the tracker.

    Implementations should handle:
    - API authentication
    - Translating provider exceptions into exceptions from exceptions.py

    Retries, timeouts and rate-limit waits are the implementation's
    concern; callers invoke each operation once.
    """

    @property
    @abstractmethod
    def username(self) -> str:
        """Login the bot comments as; commands must mention it."""
        pass

    @abstractmethod
    def check_membership(self, user: User) -> MembershipCheck:
        """Check whether a user is a team member.

        Must not raise for API or network failures: return MembershipCheck.failed()
        instead so the caller can degrade to "not a member".
        """
        pass

    @abstractmethod
    def repository_labels(self, repository: Repository) -> set[str]:
        """Names of the labels defined on the repository.

        Raises:
            TrackerError: If the labels cannot be listed.
        """
        pass

    @abstractmethod
    def set_issue_labels(self, issue: Issue, labels: list[Label]) -> None:
        """Replace the issue's labels with exactly the given set.

        Raises:
            TrackerError: If the update fails.
        """
        pass

    @abstractmethod
    def post_comment(self, issue: Issue, text: str) -> None:
        """Post a comment on the issue.

        Raises:
            TrackerError: If the comment cannot be posted.
        """
        pass
