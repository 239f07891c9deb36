"""GitHubClient: IssueTracker implementation backed by PyGithub."""

import logging
import os
from typing import NoReturn, Optional

from github import (
    Auth,
    Github,
    GithubException,
    RateLimitExceededException,
    UnknownObjectException,
)
from github.Issue import Issue as GithubIssue
from requests.exceptions import RequestException

from labelbot.events.models import Issue, Label, Repository, User
from labelbot.permissions.models import MembershipCheck

from .exceptions import (
    IssueNotFoundError,
    RateLimitError,
    TrackerAPIError,
    TrackerAuthError,
)
from .tracker import IssueTracker

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient(IssueTracker):
    """Talks to the GitHub REST API on behalf of the bot.

    Team membership is checked against a team when a team slug is
    configured, otherwise against the organization itself.

    Example usage:
        client = GitHubClient()  # Uses GITHUB_TOKEN and LABELBOT_ORG env vars
        client = GitHubClient(token="ghp_...", org="rust-lang", team_slug="triage")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        org: Optional[str] = None,
        team_slug: Optional[str] = None,
        bot_name: Optional[str] = None,
        base_url: Optional[str] = None,
        github: Optional[Github] = None,
    ):
        """Initialize the client.

        Args:
            token: GitHub token. Defaults to GITHUB_TOKEN env var.
            org: Organization whose members are trusted.
                Defaults to LABELBOT_ORG env var.
            team_slug: Team within the organization whose members are
                trusted. Defaults to LABELBOT_TEAM_SLUG env var.
            bot_name: Login the bot answers to. Defaults to
                LABELBOT_BOT_NAME env var, then to the token's own login.
            base_url: API root. Defaults to GITHUB_API_URL env var.
            github: Pre-configured PyGithub instance for testing.
                Takes precedence over token.

        Raises:
            TrackerAuthError: If neither a token nor a client is available.
        """
        self._token = token or os.getenv("GITHUB_TOKEN")
        if github is None and not self._token:
            raise TrackerAuthError(
                "GitHub token not provided. Set GITHUB_TOKEN environment variable "
                "or pass token parameter."
            )
        self._org = org or os.getenv("LABELBOT_ORG")
        self._team_slug = team_slug or os.getenv("LABELBOT_TEAM_SLUG")
        self._bot_name = bot_name or os.getenv("LABELBOT_BOT_NAME")
        self._base_url = base_url or os.getenv("GITHUB_API_URL", DEFAULT_API_URL)
        self._github = github

    def _get_github(self) -> Github:
        """Get or create the PyGithub client (lazy initialization)."""
        if self._github is None:
            self._github = Github(
                auth=Auth.Token(self._token), base_url=self._base_url
            )
        return self._github

    def _handle_github_error(self, error: GithubException, context: str) -> NoReturn:
        """Convert a PyGithub exception into a module exception.

        Raises:
            RateLimitError: If the rate limit was exceeded.
            IssueNotFoundError: If the resource does not exist (404).
            TrackerAPIError: For other API errors.
        """
        status_code = error.status
        data = error.data if isinstance(error.data, dict) else {}
        reason = data.get("message") or str(error)
        logger.error("GitHub API error (status=%s): %s", status_code, reason)

        if isinstance(error, RateLimitExceededException):
            headers = error.headers or {}
            reset = headers.get("x-ratelimit-reset")
            raise RateLimitError(reset_at=int(reset) if reset else None) from error
        if isinstance(error, UnknownObjectException):
            raise IssueNotFoundError(context) from error
        raise TrackerAPIError(
            f"{context}: GitHub API error: {reason}",
            status_code=status_code,
            reason=reason,
        ) from error

    def _get_issue(self, issue: Issue) -> GithubIssue:
        gh = self._get_github()
        repo = gh.get_repo(issue.repository.full_name, lazy=True)
        return repo.get_issue(issue.number)

    @property
    def username(self) -> str:
        if self._bot_name is None:
            try:
                self._bot_name = self._get_github().get_user().login
            except GithubException as e:
                self._handle_github_error(e, "authenticated user")
            except RequestException as e:
                raise TrackerAPIError(f"authenticated user: {e}", reason=str(e)) from e
        return self._bot_name

    def check_membership(self, user: User) -> MembershipCheck:
        if not self._org:
            return MembershipCheck.failed(
                "no organization configured (set LABELBOT_ORG)"
            )

        try:
            gh = self._get_github()
            named_user = gh.get_user(user.login)
            org = gh.get_organization(self._org)
            if self._team_slug:
                team = org.get_team_by_slug(self._team_slug)
                is_member = team.has_in_members(named_user)
            else:
                is_member = org.has_in_members(named_user)
        except (GithubException, RequestException) as e:
            return MembershipCheck.failed(e)

        logger.debug("User %s member of %s: %s", user.login, self._org, is_member)
        return MembershipCheck.member() if is_member else MembershipCheck.not_member()

    def set_issue_labels(self, issue: Issue, labels: list[Label]) -> None:
        context = f"{issue.repository.full_name}#{issue.number}"
        names = [label.name for label in labels]
        try:
            self._get_issue(issue).set_labels(*names)
        except GithubException as e:
            self._handle_github_error(e, context)
        logger.info("Set labels on %s: %s", context, ", ".join(names) or "(none)")

    def post_comment(self, issue: Issue, text: str) -> None:
        context = f"{issue.repository.full_name}#{issue.number}"
        try:
            self._get_issue(issue).create_comment(text)
        except GithubException as e:
            self._handle_github_error(e, context)
        logger.info("Posted comment on %s", context)

    def repository_labels(self, repository: Repository) -> set[str]:
        try:
            repo = self._get_github().get_repo(repository.full_name, lazy=True)
            names = {label.name for label in repo.get_labels()}
        except GithubException as e:
            self._handle_github_error(e, repository.full_name)
        logger.debug("Repository %s defines %d labels", repository.full_name, len(names))
        return names
