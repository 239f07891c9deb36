"""Unit tests for the label permission policy."""

import pytest

from labelbot.permissions import (
    OPEN_LABEL_PREFIXES,
    OPEN_LABELS,
    MembershipCheck,
    MembershipStatus,
    PermissionDecision,
    authorize,
    is_open_label,
)

RESTRICTED_LABELS = ["P-high", "I-nominated", "beta-nominated", "I-ICE-ish", "c-bug"]


class TestMembershipCheck:
    """Tests for the MembershipCheck tagged result."""

    def test_member(self):
        check = MembershipCheck.member()
        assert check.status == MembershipStatus.MEMBER
        assert check.is_member is True
        assert check.failed_to_check is False

    def test_not_member(self):
        check = MembershipCheck.not_member()
        assert check.is_member is False
        assert check.failed_to_check is False
        assert check.error is None

    def test_failed_keeps_error_text(self):
        check = MembershipCheck.failed(RuntimeError("connection reset"))
        assert check.status == MembershipStatus.CHECK_FAILED
        assert check.is_member is False
        assert check.failed_to_check is True
        assert check.error == "connection reset"


class TestPermissionDecision:
    """Tests for PermissionDecision."""

    def test_allow(self):
        decision = PermissionDecision.allow("A-foo")
        assert decision.allowed is True
        assert decision.reason == ""

    def test_to_dict(self):
        decision = PermissionDecision.deny("P-high", "restricted")
        assert decision.to_dict() == {
            "label": "P-high",
            "allowed": False,
            "reason": "restricted",
        }


class TestAuthorize:
    """Tests for authorize()."""

    @pytest.mark.parametrize("prefix", OPEN_LABEL_PREFIXES)
    def test_open_prefixes_allowed_for_non_member(self, prefix):
        decision = authorize(f"{prefix}something", MembershipCheck.not_member())
        assert decision.allowed is True

    @pytest.mark.parametrize("label", sorted(OPEN_LABELS))
    def test_open_labels_allowed_for_non_member(self, label):
        assert authorize(label, MembershipCheck.not_member()).allowed is True

    def test_allow_lists_cover_expected_namespaces(self):
        assert set(OPEN_LABEL_PREFIXES) == {
            "C-", "A-", "E-", "NLL-", "O-", "S-", "T-", "WG-",
        }
        assert OPEN_LABELS == {
            "I-compilemem", "I-compiletime", "I-crash", "I-hang", "I-ICE", "I-slow",
        }

    @pytest.mark.parametrize("label", RESTRICTED_LABELS)
    def test_member_allowed_everything(self, label):
        assert authorize(label, MembershipCheck.member()).allowed is True

    def test_non_member_denied_restricted_label(self):
        decision = authorize("P-high", MembershipCheck.not_member())
        assert decision.allowed is False
        assert decision.label == "P-high"
        assert decision.reason == "Label P-high can only be set by Rust team members"

    def test_failed_check_denial_mentions_verification(self):
        decision = authorize("P-high", MembershipCheck.failed("timeout"))
        assert decision.allowed is False
        assert decision.reason == (
            "Label P-high can only be set by Rust team members; "
            "we were unable to check if you are a team member."
        )

    @pytest.mark.parametrize("label", RESTRICTED_LABELS)
    def test_failed_check_never_grants_restricted_label(self, label):
        assert authorize(label, MembershipCheck.failed("boom")).allowed is False

    def test_failed_check_still_allows_open_label(self):
        assert authorize("E-easy", MembershipCheck.failed("boom")).allowed is True

    def test_custom_team_name(self):
        decision = authorize("P-high", MembershipCheck.not_member(), team_name="Servo")
        assert decision.reason == "Label P-high can only be set by Servo team members"


class TestIsOpenLabel:
    """Tests for is_open_label()."""

    def test_prefix_is_case_sensitive(self):
        assert is_open_label("C-bug") is True
        assert is_open_label("c-bug") is False

    def test_exact_tags_must_match_exactly(self):
        assert is_open_label("I-ICE") is True
        assert is_open_label("I-ICE-ish") is False
        assert is_open_label("I-unsound") is False
