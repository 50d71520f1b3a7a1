"""Role-based access control.

Access is a pure function of the caller's role and the requested operation.
There are no per-resource ACLs; ownership checks (e.g. "only my projects")
are done by the services on top of this gate.
"""

import enum

from models.user import Role
from services.errors import PermissionDeniedError


class Operation(str, enum.Enum):
    """Operations guarded by the access-control gate."""

    VIEW_PUBLIC_DATA = "view-public-data"
    SUBMIT_PROJECT = "submit-project"
    VIEW_OWN_PROJECTS = "view-own-projects"
    VIEW_ALL_PROJECTS = "view-all-projects"
    REVIEW_PROJECT = "review-project"
    APPROVE_REJECT_PROJECT = "approve-reject-project"
    MANAGE_PROJECTS = "manage-projects"
    MANAGE_COUNTRIES = "manage-countries"
    MANAGE_SETTINGS = "manage-settings"
    MANAGE_USERS = "manage-users"


# Operations open to anonymous callers
_ANONYMOUS = frozenset({Operation.VIEW_PUBLIC_DATA})

# Operations open to any authenticated caller
_AUTHENTICATED = _ANONYMOUS | {
    Operation.SUBMIT_PROJECT,
    Operation.VIEW_OWN_PROJECTS,
}

PERMISSIONS: dict[Role, frozenset[Operation]] = {
    Role.PUBLIC: frozenset(_AUTHENTICATED),
    Role.FOCAL_PERSON: frozenset(_AUTHENTICATED | {
        Operation.VIEW_ALL_PROJECTS,
        Operation.REVIEW_PROJECT,
    }),
    Role.APPROVER: frozenset(_AUTHENTICATED | {
        Operation.VIEW_ALL_PROJECTS,
        Operation.APPROVE_REJECT_PROJECT,
    }),
    Role.ADMIN: frozenset(Operation),
}

PRIVILEGED_ROLES = frozenset({Role.FOCAL_PERSON, Role.APPROVER, Role.ADMIN})


def _coerce_role(role: Role | str | None) -> Role | None:
    if role is None or isinstance(role, Role):
        return role
    try:
        return Role(role)
    except ValueError:
        # Unknown role strings get no more than an anonymous caller
        return None


def is_allowed(role: Role | str | None, operation: Operation) -> bool:
    """
    Decide whether a role may perform an operation.

    Args:
        role: Caller's role, or None for an unauthenticated caller
        operation: Requested operation

    Returns:
        True if allowed, False otherwise
    """
    resolved = _coerce_role(role)
    if resolved is None:
        return operation in _ANONYMOUS
    return operation in PERMISSIONS[resolved]


def require(role: Role | str | None, operation: Operation) -> None:
    """
    Raise PermissionDeniedError unless the role may perform the operation.
    """
    if not is_allowed(role, operation):
        raise PermissionDeniedError()


def is_privileged(role: Role | str | None) -> bool:
    """Whether the role sees the full (non-public) project set."""
    return _coerce_role(role) in PRIVILEGED_ROLES
