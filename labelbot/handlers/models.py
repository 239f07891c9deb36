"""Data models for label handler results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class LabelUpdateStatus(Enum):
    """How the label handler disposed of an event."""

    IGNORED = "ignored"  # wrong event kind, or no label command
    NO_CHANGE = "no_change"  # command resolved to the labels already set
    UPDATED = "updated"  # labels were replaced on the issue
    DENIED = "denied"  # a delta was not permitted; denial comment posted
    UNKNOWN_LABELS = "unknown_labels"  # would add labels the repository lacks


@dataclass
class LabelUpdateResult:
    """Outcome of handling one event.

    Attributes:
        status: What the handler did.
        issue_number: Issue the event referred to, if any.
        labels: Resolved label names (UPDATED and NO_CHANGE only).
        denied_label: Label that caused a denial.
        unknown_labels: Added labels missing from the repository.
        message: Error posted back to the user.
    """

    status: LabelUpdateStatus
    issue_number: Optional[int] = None
    labels: list[str] = field(default_factory=list)
    denied_label: Optional[str] = None
    unknown_labels: list[str] = field(default_factory=list)
    message: str = ""

    @property
    def changed(self) -> bool:
        return self.status is LabelUpdateStatus.UPDATED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        data: dict[str, Any] = {"status": self.status.value}
        if self.issue_number is not None:
            data["issue_number"] = self.issue_number
        if self.status in (LabelUpdateStatus.UPDATED, LabelUpdateStatus.NO_CHANGE):
            data["labels"] = list(self.labels)
        if self.denied_label is not None:
            data["denied_label"] = self.denied_label
            data["message"] = self.message
        if self.unknown_labels:
            data["unknown_labels"] = list(self.unknown_labels)
            data["message"] = self.message
        return data
