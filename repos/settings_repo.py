"""Repository for region colors and branding settings."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.app_settings import AppSettings, RegionColor

DEFAULT_SETTINGS_ID = "default"


async def list_region_colors(session: AsyncSession) -> list[RegionColor]:
    """List stored region colors."""
    result = await session.execute(select(RegionColor))
    return [row for row in result.scalars().all()]


async def get_region_color(session: AsyncSession, *, region: str) -> RegionColor | None:
    """Get the stored color row for one region."""
    result = await session.execute(select(RegionColor).where(RegionColor.region == region))
    return result.scalar_one_or_none()


async def get_app_settings(session: AsyncSession) -> AppSettings | None:
    """Get the branding settings row, if it has been written yet."""
    result = await session.execute(
        select(AppSettings).where(AppSettings.id == DEFAULT_SETTINGS_ID)
    )
    return result.scalar_one_or_none()
