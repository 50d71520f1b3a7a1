"""Unit tests for the project workflow state machine."""

import pytest

from models.project import ProjectStatus
from services.errors import InvalidTransitionError
from services.workflow import can_transition, check_transition, decision_status

PENDING = ProjectStatus.PENDING
UNDER_REVIEW = ProjectStatus.UNDER_REVIEW
APPROVED = ProjectStatus.APPROVED
REJECTED = ProjectStatus.REJECTED


def test_strict_linear_path_is_allowed():
    """Test: pending -> under_review -> approved|rejected."""
    assert can_transition(PENDING, UNDER_REVIEW)
    assert can_transition(UNDER_REVIEW, APPROVED)
    assert can_transition(UNDER_REVIEW, REJECTED)


def test_strict_mode_refuses_skipping_review():
    """Test: A decision cannot be taken on a pending project in strict mode."""
    assert not can_transition(PENDING, APPROVED)
    assert not can_transition(PENDING, REJECTED)
    assert not can_transition(UNDER_REVIEW, UNDER_REVIEW)


def test_permissive_mode_allows_skip_and_re_review():
    """Test: Permissive mode lets a decision skip under_review and review repeat."""
    assert can_transition(PENDING, APPROVED, strict=False)
    assert can_transition(PENDING, REJECTED, strict=False)
    assert can_transition(UNDER_REVIEW, UNDER_REVIEW, strict=False)


@pytest.mark.parametrize("strict", [True, False])
@pytest.mark.parametrize("terminal", [APPROVED, REJECTED])
@pytest.mark.parametrize("target", [UNDER_REVIEW, APPROVED, REJECTED, PENDING])
def test_terminal_statuses_never_leave(strict, terminal, target):
    """Test: approved and rejected are terminal in both modes."""
    assert not can_transition(terminal, target, strict=strict)


def test_nothing_moves_back_to_pending():
    assert not can_transition(UNDER_REVIEW, PENDING)
    assert not can_transition(UNDER_REVIEW, PENDING, strict=False)


def test_string_statuses_are_accepted():
    assert can_transition("pending", "under_review")
    assert not can_transition("approved", "rejected")


def test_check_transition_raises_with_both_statuses():
    """Test: The error carries the current and requested status."""
    with pytest.raises(InvalidTransitionError) as exc_info:
        check_transition(APPROVED, UNDER_REVIEW)
    assert exc_info.value.current == "approved"
    assert exc_info.value.target == "under_review"


def test_decision_status():
    assert decision_status(True) == APPROVED
    assert decision_status(False) == REJECTED
