"""Country reference data endpoints. Reads are public, writes are admin only."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_current_user, get_db
from models.country import CountryCreate, CountryResponse, CountryUpdate
from models.user import User
from services.countries_service import (
    create_country,
    delete_country,
    get_country,
    list_countries,
    update_country,
)

router = APIRouter()


@router.get("/countries", response_model=List[CountryResponse])
async def list_countries_endpoint(db: AsyncSession = Depends(get_db)):
    """List all countries ordered by name."""
    return await list_countries(db)


@router.get("/countries/{country_id}", response_model=CountryResponse)
async def get_country_endpoint(country_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get a country by code.

    Raises:
        404 if the country does not exist.
    """
    return await get_country(db, country_id=country_id)


@router.post("/countries", response_model=CountryResponse, status_code=status.HTTP_201_CREATED)
async def create_country_endpoint(
    country_data: CountryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Create a country (admin only)."""
    return await create_country(db, current_user=current_user, payload=country_data)


@router.patch("/countries/{country_id}", response_model=CountryResponse)
async def update_country_endpoint(
    country_id: str,
    country_data: CountryUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update a country (admin only). Only provided fields are updated."""
    return await update_country(
        db,
        current_user=current_user,
        country_id=country_id,
        payload=country_data,
    )


@router.delete("/countries/{country_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_country_endpoint(
    country_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete a country (admin only)."""
    await delete_country(db, current_user=current_user, country_id=country_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
