"""Unit tests for the role x operation access gate."""

import pytest

from auth.permissions import Operation, is_allowed, is_privileged, require
from models.user import Role
from services.errors import PermissionDeniedError

ROLE_GATED = [
    Operation.REVIEW_PROJECT,
    Operation.APPROVE_REJECT_PROJECT,
    Operation.MANAGE_PROJECTS,
    Operation.MANAGE_COUNTRIES,
    Operation.MANAGE_SETTINGS,
    Operation.MANAGE_USERS,
]


@pytest.mark.parametrize("operation", list(Operation))
def test_admin_is_allowed_everything(operation):
    """Test: Admin may perform every operation."""
    assert is_allowed(Role.ADMIN, operation) is True


@pytest.mark.parametrize("role", list(Role))
def test_any_authenticated_role_may_submit_and_view_own(role):
    """Test: Submitting and viewing own projects needs only authentication."""
    assert is_allowed(role, Operation.SUBMIT_PROJECT)
    assert is_allowed(role, Operation.VIEW_OWN_PROJECTS)
    assert is_allowed(role, Operation.VIEW_PUBLIC_DATA)


@pytest.mark.parametrize("operation", ROLE_GATED + [Operation.VIEW_ALL_PROJECTS])
def test_public_role_is_denied_role_gated_operations(operation):
    """Test: The public role gets none of the role-gated operations."""
    assert is_allowed(Role.PUBLIC, operation) is False
    with pytest.raises(PermissionDeniedError):
        require(Role.PUBLIC, operation)


def test_focal_person_reviews_but_does_not_decide():
    """Test: Focal person may review and see all projects, not approve."""
    assert is_allowed(Role.FOCAL_PERSON, Operation.REVIEW_PROJECT)
    assert is_allowed(Role.FOCAL_PERSON, Operation.VIEW_ALL_PROJECTS)
    assert not is_allowed(Role.FOCAL_PERSON, Operation.APPROVE_REJECT_PROJECT)
    assert not is_allowed(Role.FOCAL_PERSON, Operation.MANAGE_COUNTRIES)


def test_approver_decides_but_does_not_review():
    """Test: Approver may approve/reject and see all projects, not review."""
    assert is_allowed(Role.APPROVER, Operation.APPROVE_REJECT_PROJECT)
    assert is_allowed(Role.APPROVER, Operation.VIEW_ALL_PROJECTS)
    assert not is_allowed(Role.APPROVER, Operation.REVIEW_PROJECT)
    assert not is_allowed(Role.APPROVER, Operation.MANAGE_SETTINGS)


def test_anonymous_caller_may_only_read_public_data():
    """Test: No role means public reads only."""
    assert is_allowed(None, Operation.VIEW_PUBLIC_DATA)
    for operation in Operation:
        if operation != Operation.VIEW_PUBLIC_DATA:
            assert not is_allowed(None, operation)


def test_role_strings_are_accepted_and_unknown_roles_are_anonymous():
    """Test: Stored role strings work; an unknown role gets nothing beyond public data."""
    assert is_allowed("approver", Operation.APPROVE_REJECT_PROJECT)
    assert not is_allowed("superuser", Operation.SUBMIT_PROJECT)
    assert is_allowed("superuser", Operation.VIEW_PUBLIC_DATA)


def test_permission_denied_message_is_generic():
    """Test: The error does not reveal which role would have been enough."""
    with pytest.raises(PermissionDeniedError) as exc_info:
        require(Role.FOCAL_PERSON, Operation.APPROVE_REJECT_PROJECT)
    assert str(exc_info.value) == "Not permitted"
    assert "approver" not in str(exc_info.value)


def test_is_privileged():
    assert not is_privileged(Role.PUBLIC)
    assert not is_privileged(None)
    assert is_privileged(Role.FOCAL_PERSON)
    assert is_privileged("approver")
    assert is_privileged(Role.ADMIN)
