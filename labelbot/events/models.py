"""Data models for incoming webhook events."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class User:
    """A GitHub account, identified by login."""

    login: str


@dataclass(frozen=True)
class Label:
    """An issue label. Labels are identified solely by name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Repository:
    """Repository an event was delivered for."""

    full_name: str

    @property
    def owner(self) -> str:
        return self.full_name.split("/", 1)[0]


@dataclass
class Issue:
    """An issue (or pull request) and its labels at delivery time.

    Attributes:
        number: Issue number within the repository.
        repository: Repository the issue belongs to.
        labels: Current labels; names are unique.
        title: Issue title, for log messages.
    """

    number: int
    repository: Repository
    labels: list[Label] = field(default_factory=list)
    title: str = ""

    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "number": self.number,
            "repository": self.repository.full_name,
            "labels": self.label_names(),
            "title": self.title,
        }


@dataclass
class Comment:
    """A comment posted on an issue."""

    id: int
    body: str
    html_url: str
    user: User


@dataclass
class Event:
    """Base class for events handed to the dispatcher."""

    name: str
    action: str = ""


@dataclass
class IssueCommentEvent(Event):
    """A comment was created, edited or deleted on an issue."""

    issue: Optional[Issue] = None
    comment: Optional[Comment] = None

    @property
    def repository(self) -> Repository:
        return self.issue.repository


@dataclass
class UnsupportedEvent(Event):
    """Any webhook kind no handler is written against."""

    pass
