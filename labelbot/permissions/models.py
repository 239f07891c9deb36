"""Data models for label permission decisions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class MembershipStatus(Enum):
    """Outcome of asking the tracker whether a user is a team member."""

    MEMBER = "member"
    NOT_MEMBER = "not_member"
    CHECK_FAILED = "check_failed"


@dataclass(frozen=True)
class MembershipCheck:
    """Tagged result of a membership check.

    A failed check carries the error that prevented it. It is never
    treated as membership.

    Attributes:
        status: Which of the three outcomes occurred.
        error: Description of the failure, for CHECK_FAILED only.
    """

    status: MembershipStatus
    error: Optional[str] = None

    @classmethod
    def member(cls) -> "MembershipCheck":
        return cls(status=MembershipStatus.MEMBER)

    @classmethod
    def not_member(cls) -> "MembershipCheck":
        return cls(status=MembershipStatus.NOT_MEMBER)

    @classmethod
    def failed(cls, error: object) -> "MembershipCheck":
        return cls(status=MembershipStatus.CHECK_FAILED, error=str(error))

    @property
    def is_member(self) -> bool:
        return self.status is MembershipStatus.MEMBER

    @property
    def failed_to_check(self) -> bool:
        return self.status is MembershipStatus.CHECK_FAILED


@dataclass(frozen=True)
class PermissionDecision:
    """Whether a user may add or remove a given label.

    Attributes:
        label: Name of the label the decision is about.
        allowed: True if the change may proceed.
        reason: User-facing explanation, set on denial.
    """

    label: str
    allowed: bool
    reason: str = ""

    @classmethod
    def allow(cls, label: str) -> "PermissionDecision":
        return cls(label=label, allowed=True)

    @classmethod
    def deny(cls, label: str, reason: str) -> "PermissionDecision":
        return cls(label=label, allowed=False, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"label": self.label, "allowed": self.allowed, "reason": self.reason}
