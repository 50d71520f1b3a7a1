"""Aggregation of projects into map statistics.

The roll-ups are plain functions over a sequence of projects so they can be
tested without a database; the async wrappers below load the input set and
decide which variant the caller gets. Nothing is cached: every read
recomputes from the current rows.
"""

from collections.abc import Iterable

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from auth.permissions import is_privileged
from models.project import Project, ProjectStatus
from models.user import User
from repos import countries_repo, projects_repo
from services.reference_data import ALWAYS_LISTED_RECS, REC_INFO, rec_members

# Map coloring in the privileged view: the first status present wins
DISPLAY_STATUS_PRIORITY: tuple[ProjectStatus, ...] = (
    ProjectStatus.REJECTED,
    ProjectStatus.PENDING,
    ProjectStatus.UNDER_REVIEW,
    ProjectStatus.APPROVED,
)


class CountryProject(BaseModel):
    """A project as listed under a country."""

    id: str
    title: str
    pillar: str
    status: str | None = None


class CountryStatistic(BaseModel):
    """Per-country roll-up. status_counts/display_status are privileged-only."""

    country: str
    country_id: str | None = None
    total_projects: int
    pillar_counts: dict[str, int]
    projects: list[CountryProject]
    status_counts: dict[str, int] | None = None
    display_status: str | None = None


class PillarSplit(BaseModel):
    approved: int = 0
    not_approved: int = 0


class OverviewStatistic(BaseModel):
    """Totals over every project regardless of country."""

    total_projects: int
    approved_projects: int
    pending_projects: int
    under_review_projects: int
    rejected_projects: int
    pillar_breakdown: dict[str, PillarSplit]


class RecStatistic(BaseModel):
    """Approved-project count for one Regional Economic Community."""

    rec: str
    name: str
    member_count: int
    project_count: int


def display_status(status_counts: dict[str, int]) -> str | None:
    """
    Pick the status a country is colored by on the privileged map.

    Priority is rejected > pending > under_review > approved.
    """
    for status in DISPLAY_STATUS_PRIORITY:
        if status_counts.get(status.value, 0) > 0:
            return status.value
    return None


def country_statistics(
    projects: Iterable[Project],
    *,
    privileged: bool,
    country_ids: dict[str, str] | None = None,
) -> list[CountryStatistic]:
    """
    Group projects by country.

    Args:
        projects: Input set. Callers pass approved projects only for the
            public variant and every project for the privileged one.
        privileged: Add status counts, per-project status and display status
        country_ids: Optional country name -> code lookup

    Returns:
        One entry per country with at least one input project, in the order
        countries are first encountered
    """
    country_ids = country_ids or {}
    grouped: dict[str, list[Project]] = {}
    for project in projects:
        grouped.setdefault(project.country, []).append(project)

    statistics = []
    for country, country_projects in grouped.items():
        pillar_counts: dict[str, int] = {}
        for project in country_projects:
            pillar_counts[project.pifah_pillar] = pillar_counts.get(project.pifah_pillar, 0) + 1

        entry = CountryStatistic(
            country=country,
            country_id=country_ids.get(country),
            total_projects=len(country_projects),
            pillar_counts=pillar_counts,
            projects=[
                CountryProject(
                    id=str(project.id),
                    title=project.project_title,
                    pillar=project.pifah_pillar,
                    status=project.status if privileged else None,
                )
                for project in country_projects
            ],
        )

        if privileged:
            status_counts: dict[str, int] = {}
            for project in country_projects:
                status_counts[project.status] = status_counts.get(project.status, 0) + 1
            entry.status_counts = status_counts
            entry.display_status = display_status(status_counts)

        statistics.append(entry)

    return statistics


def overview_statistics(projects: Iterable[Project]) -> OverviewStatistic:
    """
    Single pass over all projects: status totals and per-pillar approval split.
    """
    status_counts = {status.value: 0 for status in ProjectStatus}
    pillar_breakdown: dict[str, PillarSplit] = {}
    total = 0

    for project in projects:
        total += 1
        if project.status in status_counts:
            status_counts[project.status] += 1
        split = pillar_breakdown.setdefault(project.pifah_pillar, PillarSplit())
        if project.status == ProjectStatus.APPROVED.value:
            split.approved += 1
        else:
            split.not_approved += 1

    return OverviewStatistic(
        total_projects=total,
        approved_projects=status_counts[ProjectStatus.APPROVED.value],
        pending_projects=status_counts[ProjectStatus.PENDING.value],
        under_review_projects=status_counts[ProjectStatus.UNDER_REVIEW.value],
        rejected_projects=status_counts[ProjectStatus.REJECTED.value],
        pillar_breakdown=pillar_breakdown,
    )


def rec_statistics(projects: Iterable[Project]) -> list[RecStatistic]:
    """
    Count approved projects per Regional Economic Community.

    A project counts towards every REC its country belongs to. CEN-SAD is
    only listed when it has projects.
    """
    approved = [p for p in projects if p.status == ProjectStatus.APPROVED.value]

    statistics = []
    for rec, (name, member_count) in REC_INFO.items():
        members = set(rec_members(rec))
        project_count = sum(1 for project in approved if project.country in members)
        if project_count > 0 or rec in ALWAYS_LISTED_RECS:
            statistics.append(
                RecStatistic(
                    rec=rec,
                    name=name,
                    member_count=member_count,
                    project_count=project_count,
                )
            )
    return statistics


async def _projects_for(session: AsyncSession, current_user: User | None) -> tuple[list[Project], bool]:
    privileged = current_user is not None and is_privileged(current_user.role)
    if privileged:
        projects = await projects_repo.list(session)
    else:
        projects = await projects_repo.list_approved(session)
    return projects, privileged


async def get_country_statistics(
    session: AsyncSession,
    *,
    current_user: User | None,
) -> list[CountryStatistic]:
    """
    Per-country statistics for the map.

    Anonymous and public-role callers get the approved-only variant; focal
    persons, approvers and admins get every project with status detail.
    """
    projects, privileged = await _projects_for(session, current_user)
    country_ids = await countries_repo.ids_by_name(session)
    return country_statistics(projects, privileged=privileged, country_ids=country_ids)


async def get_single_country_statistics(
    session: AsyncSession,
    *,
    current_user: User | None,
    country: str,
) -> CountryStatistic:
    """Statistics for one country name; zero totals when it has no projects."""
    projects, privileged = await _projects_for(session, current_user)
    country_ids = await countries_repo.ids_by_name(session)
    matching = [project for project in projects if project.country == country]

    statistics = country_statistics(matching, privileged=privileged, country_ids=country_ids)
    if statistics:
        return statistics[0]

    return CountryStatistic(
        country=country,
        country_id=country_ids.get(country),
        total_projects=0,
        pillar_counts={},
        projects=[],
        status_counts={} if privileged else None,
        display_status=None,
    )


async def get_overview_statistics(session: AsyncSession) -> OverviewStatistic:
    """Overview across every project, regardless of status."""
    projects = await projects_repo.list(session)
    return overview_statistics(projects)


async def get_rec_statistics(session: AsyncSession) -> list[RecStatistic]:
    """Approved projects per REC."""
    projects = await projects_repo.list_approved(session)
    return rec_statistics(projects)
