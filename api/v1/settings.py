"""Display settings endpoints: region colors and branding."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_db
from models.app_settings import AppSettingsResponse, AppSettingsUpdate, RegionColors
from models.user import User
from services import settings_service

router = APIRouter()


@router.get("/region-colors", response_model=RegionColors)
async def get_region_colors_endpoint(db: AsyncSession = Depends(get_db)):
    """Map colors per region."""
    return await settings_service.get_region_colors(db)


@router.put("/region-colors", response_model=RegionColors)
async def update_region_colors_endpoint(
    colors: RegionColors,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Replace the colors of all five regions (admin only)."""
    return await settings_service.update_region_colors(db, current_user=current_user, payload=colors)


@router.get("/settings", response_model=AppSettingsResponse)
async def get_settings_endpoint(db: AsyncSession = Depends(get_db)):
    """Logo and banner image references."""
    return await settings_service.get_app_settings(db)


@router.patch("/settings", response_model=AppSettingsResponse)
async def update_settings_endpoint(
    settings_data: AppSettingsUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update logo and/or banner references (admin only)."""
    return await settings_service.update_app_settings(
        db,
        current_user=current_user,
        payload=settings_data,
    )
