"""Repository for Country database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.country import Country


async def get_by_id(session: AsyncSession, *, country_id: str) -> Country | None:
    """
    Get a country by its code.

    Args:
        session: Database session
        country_id: Country code, e.g. "ke"

    Returns:
        Country if found, None otherwise
    """
    result = await session.execute(select(Country).where(Country.id == country_id))
    return result.scalar_one_or_none()


async def get_by_name(session: AsyncSession, *, name: str) -> Country | None:
    """Get a country by its display name."""
    result = await session.execute(select(Country).where(Country.name == name))
    return result.scalar_one_or_none()


async def ids_by_name(session: AsyncSession) -> dict[str, str]:
    """Map every country display name to its code."""
    result = await session.execute(select(Country.name, Country.id))
    return {name: country_id for name, country_id in result.all()}


async def create(session: AsyncSession, country: Country) -> Country:
    """
    Create a new country.

    Args:
        session: Database session
        country: Country instance to create

    Returns:
        Created country
    """
    session.add(country)
    await session.flush()
    await session.refresh(country)
    return country


async def delete(session: AsyncSession, country: Country) -> None:
    """Delete a country."""
    await session.delete(country)
    await session.flush()


async def list(session: AsyncSession) -> list[Country]:
    """List all countries ordered by name."""
    result = await session.execute(select(Country).order_by(Country.name))
    return [country for country in result.scalars().all()]
