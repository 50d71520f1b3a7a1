"""Service layer for Country reference data."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from auth.permissions import Operation, require
from db import commit
from models.country import Country, CountryCreate, CountryUpdate
from models.user import User
from repos import countries_repo
from services.errors import NotFoundError, ValidationError
from services.reference_data import DEFAULT_COUNTRIES

logger = logging.getLogger(__name__)


async def list_countries(session: AsyncSession) -> list[Country]:
    """List all countries ordered by name."""
    return await countries_repo.list(session)


async def get_country(session: AsyncSession, *, country_id: str) -> Country:
    """
    Get a country by code.

    Raises:
        NotFoundError: If no country has this code
    """
    country = await countries_repo.get_by_id(session, country_id=country_id.lower())
    if not country:
        raise NotFoundError("Country")
    return country


async def create_country(
    session: AsyncSession,
    *,
    current_user: User,
    payload: CountryCreate,
) -> Country:
    """
    Create a country (administrator only).

    Raises:
        PermissionDeniedError: If the caller may not manage countries
        ValidationError: If the code or name is already taken
    """
    require(current_user.role, Operation.MANAGE_COUNTRIES)

    country_id = payload.id.lower()
    if await countries_repo.get_by_id(session, country_id=country_id):
        raise ValidationError("id", f"Country '{country_id}' already exists")
    if await countries_repo.get_by_name(session, name=payload.name):
        raise ValidationError("name", f"Country '{payload.name}' already exists")

    country = Country(
        id=country_id,
        name=payload.name,
        capital=payload.capital,
        population=payload.population,
        area=payload.area,
        region=payload.region.value,
        gdp=payload.gdp,
        languages=payload.languages,
    )
    created = await countries_repo.create(session, country)
    await commit(session)

    logger.info("Country %s created by %s", created.id, current_user.id)
    return created


async def update_country(
    session: AsyncSession,
    *,
    current_user: User,
    country_id: str,
    payload: CountryUpdate,
) -> Country:
    """
    Update a country (administrator only). Only provided fields are written.

    Raises:
        PermissionDeniedError: If the caller may not manage countries
        NotFoundError: If the country does not exist
        ValidationError: If the new name is taken or a required field is nulled
    """
    require(current_user.role, Operation.MANAGE_COUNTRIES)
    country = await get_country(session, country_id=country_id)

    changes = payload.model_dump(exclude_unset=True)
    for field in ("name", "capital", "population", "area", "region"):
        if field in changes and changes[field] is None:
            raise ValidationError(field, "This field cannot be empty")

    if "name" in changes and changes["name"] != country.name:
        if await countries_repo.get_by_name(session, name=changes["name"]):
            raise ValidationError("name", f"Country '{changes['name']}' already exists")

    if payload.region is not None:
        changes["region"] = payload.region.value

    for field, value in changes.items():
        setattr(country, field, value)

    await commit(session)
    await session.refresh(country)

    logger.info("Country %s updated by %s", country.id, current_user.id)
    return country


async def delete_country(
    session: AsyncSession,
    *,
    current_user: User,
    country_id: str,
) -> None:
    """
    Delete a country (administrator only).

    Raises:
        PermissionDeniedError: If the caller may not manage countries
        NotFoundError: If the country does not exist
    """
    require(current_user.role, Operation.MANAGE_COUNTRIES)
    country = await get_country(session, country_id=country_id)

    await countries_repo.delete(session, country)
    await commit(session)

    logger.info("Country %s deleted by %s", country_id, current_user.id)


async def seed_default_countries(session: AsyncSession) -> int:
    """
    Insert the default African countries that are not present yet.

    Returns:
        Number of countries inserted
    """
    existing = await countries_repo.ids_by_name(session)
    existing_ids = set(existing.values())

    inserted = 0
    for country_id, name, capital, population, area, region, gdp in DEFAULT_COUNTRIES:
        if country_id in existing_ids or name in existing:
            continue
        session.add(
            Country(
                id=country_id,
                name=name,
                capital=capital,
                population=population,
                area=area,
                region=region,
                gdp=gdp,
            )
        )
        inserted += 1

    if inserted:
        await commit(session)
        logger.info("Seeded %d countries", inserted)
    return inserted
