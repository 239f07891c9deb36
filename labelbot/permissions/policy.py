"""Label permission policy.

Team members may set any label. Everyone else may only touch labels in the
open namespaces below, plus a handful of issue-impact tags.
"""

from .models import MembershipCheck, PermissionDecision

OPEN_LABEL_PREFIXES: tuple[str, ...] = (
    "C-",  # categories
    "A-",  # areas
    "E-",  # easy, mentor, etc.
    "NLL-",
    "O-",  # operating systems
    "S-",  # status labels
    "T-",
    "WG-",
)

OPEN_LABELS: frozenset[str] = frozenset(
    {
        "I-compilemem",
        "I-compiletime",
        "I-crash",
        "I-hang",
        "I-ICE",
        "I-slow",
    }
)

DEFAULT_TEAM_NAME = "Rust"


def is_open_label(label_name: str) -> bool:
    """Return True if any user may set this label."""
    return label_name.startswith(OPEN_LABEL_PREFIXES) or label_name in OPEN_LABELS


def authorize(
    label_name: str,
    membership: MembershipCheck,
    team_name: str = DEFAULT_TEAM_NAME,
) -> PermissionDecision:
    """Decide whether the acting user may add or remove a label.

    Args:
        label_name: Label the user asked to change.
        membership: Result of checking the user's team membership.
        team_name: Team name used in denial messages.

    Returns:
        An allow decision, or a deny decision whose reason is suitable for
        posting back to the user.
    """
    if membership.is_member or is_open_label(label_name):
        return PermissionDecision.allow(label_name)

    reason = f"Label {label_name} can only be set by {team_name} team members"
    if membership.failed_to_check:
        reason += "; we were unable to check if you are a team member."
    return PermissionDecision.deny(label_name, reason)
