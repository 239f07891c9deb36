"""Unit tests for the PyGithub-backed GitHubClient."""

import os
from unittest.mock import MagicMock, patch

import pytest
import requests
from github import GithubException, RateLimitExceededException, UnknownObjectException

from labelbot.events import Issue, Label, Repository, User
from labelbot.permissions import MembershipCheck, MembershipStatus
from labelbot.tracker import (
    GitHubClient,
    IssueNotFoundError,
    RateLimitError,
    TrackerAPIError,
    TrackerAuthError,
    TrackerError,
)


def _make_issue() -> Issue:
    return Issue(
        number=42,
        repository=Repository(full_name="rust-lang/rust"),
        labels=[Label(name="A-foo")],
    )


def _make_client(github=None, **kwargs) -> GitHubClient:
    kwargs.setdefault("org", "rust-lang")
    kwargs.setdefault("bot_name", "rustbot")
    return GitHubClient(github=github or MagicMock(), **kwargs)


class TestGitHubClientInit:
    """Tests for construction and configuration."""

    def test_requires_token(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(TrackerAuthError):
                GitHubClient()

    def test_token_from_env(self):
        with patch.dict(os.environ, {"GITHUB_TOKEN": "ghp_test"}, clear=True):
            client = GitHubClient(bot_name="rustbot")
        assert client.username == "rustbot"

    def test_bot_name_from_env(self):
        env = {"GITHUB_TOKEN": "ghp_test", "LABELBOT_BOT_NAME": "triagebot"}
        with patch.dict(os.environ, env, clear=True):
            assert GitHubClient().username == "triagebot"

    def test_username_falls_back_to_token_login(self):
        gh = MagicMock()
        gh.get_user.return_value.login = "my-bot[bot]"
        with patch.dict(os.environ, {}, clear=True):
            client = GitHubClient(github=gh)
            assert client.username == "my-bot[bot]"
            assert client.username == "my-bot[bot]"
        gh.get_user.assert_called_once_with()

    def test_username_network_error_translated(self):
        gh = MagicMock()
        gh.get_user.side_effect = requests.exceptions.ConnectionError("unreachable")
        with patch.dict(os.environ, {}, clear=True):
            client = GitHubClient(github=gh)
            with pytest.raises(TrackerAPIError, match="unreachable"):
                client.username

    def test_lazy_github_creation(self):
        with patch("labelbot.tracker.client.Github") as github_cls:
            client = GitHubClient(token="ghp_test", bot_name="rustbot", base_url="https://ghe.example/api/v3")
            github_cls.assert_not_called()
            client.post_comment(_make_issue(), "hello")
        github_cls.assert_called_once()
        assert github_cls.call_args.kwargs["base_url"] == "https://ghe.example/api/v3"


class TestCheckMembership:
    """Tests for check_membership()."""

    def test_org_member(self):
        gh = MagicMock()
        gh.get_organization.return_value.has_in_members.return_value = True

        check = _make_client(gh).check_membership(User(login="alice"))

        assert check == MembershipCheck.member()
        gh.get_organization.assert_called_once_with("rust-lang")
        gh.get_user.assert_called_once_with("alice")
        gh.get_organization.return_value.has_in_members.assert_called_once_with(
            gh.get_user.return_value
        )

    def test_org_non_member(self):
        gh = MagicMock()
        gh.get_organization.return_value.has_in_members.return_value = False

        check = _make_client(gh).check_membership(User(login="bob"))

        assert check == MembershipCheck.not_member()

    def test_team_membership_when_slug_configured(self):
        gh = MagicMock()
        org = gh.get_organization.return_value
        org.get_team_by_slug.return_value.has_in_members.return_value = True

        check = _make_client(gh, team_slug="compiler").check_membership(User(login="alice"))

        assert check.is_member is True
        org.get_team_by_slug.assert_called_once_with("compiler")
        org.has_in_members.assert_not_called()

    def test_api_error_becomes_failed_check(self):
        gh = MagicMock()
        gh.get_organization.side_effect = GithubException(502, {"message": "Bad Gateway"})

        check = _make_client(gh).check_membership(User(login="alice"))

        assert check.status == MembershipStatus.CHECK_FAILED
        assert check.error

    def test_network_error_becomes_failed_check(self):
        gh = MagicMock()
        gh.get_user.side_effect = requests.exceptions.ConnectionError("connection reset")

        check = _make_client(gh).check_membership(User(login="alice"))

        assert check.status == MembershipStatus.CHECK_FAILED
        assert check.error == "connection reset"

    def test_timeout_becomes_failed_check(self):
        gh = MagicMock()
        gh.get_organization.return_value.has_in_members.side_effect = (
            requests.exceptions.ReadTimeout("read timed out")
        )

        check = _make_client(gh).check_membership(User(login="alice"))

        assert check.failed_to_check is True

    def test_missing_org_is_failed_check(self):
        gh = MagicMock()
        with patch.dict(os.environ, {}, clear=True):
            client = GitHubClient(github=gh, bot_name="rustbot")
        check = client.check_membership(User(login="alice"))

        assert check.failed_to_check is True
        assert "LABELBOT_ORG" in check.error
        gh.get_organization.assert_not_called()


class TestRepositoryLabels:
    """Tests for repository_labels()."""

    def test_lists_label_names(self):
        gh = MagicMock()
        first, second = MagicMock(), MagicMock()
        first.name = "A-foo"
        second.name = "E-easy"
        gh.get_repo.return_value.get_labels.return_value = [first, second]

        names = _make_client(gh).repository_labels(Repository(full_name="rust-lang/rust"))

        assert names == {"A-foo", "E-easy"}
        gh.get_repo.assert_called_once_with("rust-lang/rust", lazy=True)

    def test_api_error_translated(self):
        gh = MagicMock()
        gh.get_repo.return_value.get_labels.side_effect = UnknownObjectException(
            404, {"message": "Not Found"}
        )

        with pytest.raises(IssueNotFoundError) as exc_info:
            _make_client(gh).repository_labels(Repository(full_name="rust-lang/gone"))
        assert exc_info.value.resource == "rust-lang/gone"


class TestIssueOperations:
    """Tests for set_issue_labels() and post_comment()."""

    def test_set_issue_labels(self):
        gh = MagicMock()
        issue = _make_issue()

        _make_client(gh).set_issue_labels(issue, [Label(name="A-foo"), Label(name="E-easy")])

        gh.get_repo.assert_called_once_with("rust-lang/rust", lazy=True)
        gh.get_repo.return_value.get_issue.assert_called_once_with(42)
        gh_issue = gh.get_repo.return_value.get_issue.return_value
        gh_issue.set_labels.assert_called_once_with("A-foo", "E-easy")

    def test_set_empty_labels(self):
        gh = MagicMock()
        _make_client(gh).set_issue_labels(_make_issue(), [])
        gh.get_repo.return_value.get_issue.return_value.set_labels.assert_called_once_with()

    def test_post_comment(self):
        gh = MagicMock()
        _make_client(gh).post_comment(_make_issue(), "**Error**: nope")
        gh_issue = gh.get_repo.return_value.get_issue.return_value
        gh_issue.create_comment.assert_called_once_with("**Error**: nope")

    def test_api_error_translated(self):
        gh = MagicMock()
        gh.get_repo.return_value.get_issue.return_value.set_labels.side_effect = (
            GithubException(422, {"message": "Validation Failed"})
        )

        with pytest.raises(TrackerAPIError) as exc_info:
            _make_client(gh).set_issue_labels(_make_issue(), [Label(name="A-foo")])

        assert exc_info.value.status_code == 422
        assert exc_info.value.reason == "Validation Failed"
        assert "rust-lang/rust#42" in str(exc_info.value)

    def test_not_found_translated(self):
        gh = MagicMock()
        gh.get_repo.return_value.get_issue.side_effect = UnknownObjectException(
            404, {"message": "Not Found"}
        )

        with pytest.raises(IssueNotFoundError) as exc_info:
            _make_client(gh).post_comment(_make_issue(), "text")
        assert exc_info.value.resource == "rust-lang/rust#42"

    def test_rate_limit_translated(self):
        gh = MagicMock()
        gh.get_repo.return_value.get_issue.return_value.create_comment.side_effect = (
            RateLimitExceededException(
                403, {"message": "API rate limit exceeded"}, {"x-ratelimit-reset": "1700000000"}
            )
        )

        with pytest.raises(RateLimitError) as exc_info:
            _make_client(gh).post_comment(_make_issue(), "text")
        assert exc_info.value.reset_at == 1700000000
        assert isinstance(exc_info.value, TrackerError)
