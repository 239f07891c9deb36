"""Label permission policy.

Public API:
    authorize: Decide whether a user may change a label.
    is_open_label: Whether a label is open to every user.
    OPEN_LABEL_PREFIXES, OPEN_LABELS: Static allow-lists.
    MembershipCheck, MembershipStatus: Tagged membership check result.
    PermissionDecision: Allow/deny outcome with reason.
"""

from .models import MembershipCheck, MembershipStatus, PermissionDecision
from .policy import (
    DEFAULT_TEAM_NAME,
    OPEN_LABEL_PREFIXES,
    OPEN_LABELS,
    authorize,
    is_open_label,
)

__all__ = [
    "authorize",
    "is_open_label",
    "OPEN_LABEL_PREFIXES",
    "OPEN_LABELS",
    "DEFAULT_TEAM_NAME",
    "MembershipCheck",
    "MembershipStatus",
    "PermissionDecision",
]
