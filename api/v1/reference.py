"""Static reference data endpoint."""

from fastapi import APIRouter

from services.reference_data import reference_payload

router = APIRouter()


@router.get("/reference")
async def get_reference_data():
    """
    Pillars, project regions and stages, country regions, and the Regional
    Economic Communities with their member countries.
    """
    return reference_payload()
