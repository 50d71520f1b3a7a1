"""Service layer for region colors and branding settings."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from auth.permissions import Operation, require
from db import commit
from models.app_settings import AppSettings, AppSettingsUpdate, RegionColor, RegionColors
from models.user import User
from repos import settings_repo
from services.reference_data import DEFAULT_REGION_COLORS

logger = logging.getLogger(__name__)


async def get_region_colors(session: AsyncSession) -> RegionColors:
    """
    Current region colors, falling back to the defaults for unset regions.
    """
    colors = dict(DEFAULT_REGION_COLORS)
    for row in await settings_repo.list_region_colors(session):
        if row.region in colors:
            colors[row.region] = row.color
    return RegionColors(**colors)


async def update_region_colors(
    session: AsyncSession,
    *,
    current_user: User,
    payload: RegionColors,
) -> RegionColors:
    """
    Replace the colors of all five regions (administrator only).

    Raises:
        PermissionDeniedError: If the caller may not manage settings
    """
    require(current_user.role, Operation.MANAGE_SETTINGS)

    for region, color in payload.model_dump().items():
        row = await settings_repo.get_region_color(session, region=region)
        if row:
            row.color = color
        else:
            session.add(RegionColor(region=region, color=color))

    await commit(session)
    logger.info("Region colors updated by %s", current_user.id)
    return await get_region_colors(session)


async def get_app_settings(session: AsyncSession) -> AppSettings:
    """
    Branding settings. Returns an unsaved default row if none was written yet.
    """
    settings = await settings_repo.get_app_settings(session)
    if settings is None:
        settings = AppSettings(
            id=settings_repo.DEFAULT_SETTINGS_ID,
            logo_url=None,
            banner_image_url=None,
        )
    return settings


async def update_app_settings(
    session: AsyncSession,
    *,
    current_user: User,
    payload: AppSettingsUpdate,
) -> AppSettings:
    """
    Update logo and/or banner references (administrator only).

    Raises:
        PermissionDeniedError: If the caller may not manage settings
    """
    require(current_user.role, Operation.MANAGE_SETTINGS)

    settings = await settings_repo.get_app_settings(session)
    if settings is None:
        settings = AppSettings(id=settings_repo.DEFAULT_SETTINGS_ID)
        session.add(settings)

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(settings, field, value)

    await commit(session)
    await session.refresh(settings)

    logger.info("Branding settings updated by %s", current_user.id)
    return settings
