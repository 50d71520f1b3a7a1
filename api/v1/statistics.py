"""Map statistics endpoints. Open to anonymous callers."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db, get_optional_user
from models.user import User
from services.statistics_service import (
    CountryStatistic,
    OverviewStatistic,
    RecStatistic,
    get_country_statistics,
    get_overview_statistics,
    get_rec_statistics,
    get_single_country_statistics,
)

router = APIRouter()


@router.get("/statistics/countries", response_model=List[CountryStatistic])
async def country_statistics_endpoint(
    current_user: User | None = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Per-country project statistics.

    Anonymous and public-role callers see approved projects only. Focal
    persons, approvers and admins see every project plus status counts and
    the status the country is colored by.
    """
    return await get_country_statistics(db, current_user=current_user)


@router.get("/statistics/countries/{country}", response_model=CountryStatistic)
async def single_country_statistics_endpoint(
    country: str,
    current_user: User | None = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Statistics for one country, by display name.
    """
    return await get_single_country_statistics(db, current_user=current_user, country=country)


@router.get("/statistics/overview", response_model=OverviewStatistic)
async def overview_statistics_endpoint(db: AsyncSession = Depends(get_db)):
    """
    Status totals and per-pillar approved/not-approved split over all projects.
    """
    return await get_overview_statistics(db)


@router.get("/statistics/recs", response_model=List[RecStatistic])
async def rec_statistics_endpoint(db: AsyncSession = Depends(get_db)):
    """
    Approved projects per Regional Economic Community.
    """
    return await get_rec_statistics(db)
