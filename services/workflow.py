"""Project workflow state machine.

    pending -> under_review -> approved | rejected

approved and rejected are terminal. Administrator direct edits bypass this
table entirely; see projects_service.update_project.
"""

from models.project import ProjectStatus
from services.errors import InvalidTransitionError

TERMINAL_STATUSES = frozenset({ProjectStatus.APPROVED, ProjectStatus.REJECTED})

# target -> statuses a transition into target may start from
STRICT_SOURCES: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.UNDER_REVIEW: frozenset({ProjectStatus.PENDING}),
    ProjectStatus.APPROVED: frozenset({ProjectStatus.UNDER_REVIEW}),
    ProjectStatus.REJECTED: frozenset({ProjectStatus.UNDER_REVIEW}),
}

# Permissive mode: re-review allowed, and a decision may skip under_review
PERMISSIVE_SOURCES: dict[ProjectStatus, frozenset[ProjectStatus]] = {
    ProjectStatus.UNDER_REVIEW: frozenset({ProjectStatus.PENDING, ProjectStatus.UNDER_REVIEW}),
    ProjectStatus.APPROVED: frozenset({ProjectStatus.PENDING, ProjectStatus.UNDER_REVIEW}),
    ProjectStatus.REJECTED: frozenset({ProjectStatus.PENDING, ProjectStatus.UNDER_REVIEW}),
}


def decision_status(approved: bool) -> ProjectStatus:
    """Map the approver's boolean decision to a status."""
    return ProjectStatus.APPROVED if approved else ProjectStatus.REJECTED


def can_transition(
    current: ProjectStatus | str,
    target: ProjectStatus | str,
    *,
    strict: bool = True,
) -> bool:
    """
    Check whether a workflow transition is legal.

    Args:
        current: Project's current status
        target: Requested status
        strict: Enforce the linear pending -> under_review -> decision path

    Returns:
        True if the transition is allowed
    """
    current = ProjectStatus(current)
    target = ProjectStatus(target)
    if current in TERMINAL_STATUSES:
        return False
    sources = (STRICT_SOURCES if strict else PERMISSIVE_SOURCES).get(target)
    return sources is not None and current in sources


def check_transition(
    current: ProjectStatus | str,
    target: ProjectStatus | str,
    *,
    strict: bool = True,
) -> None:
    """Raise InvalidTransitionError unless can_transition() allows the move."""
    if not can_transition(current, target, strict=strict):
        raise InvalidTransitionError(ProjectStatus(current).value, ProjectStatus(target).value)
