"""Liveness endpoint for the portal API."""

from fastapi import APIRouter

import config

router = APIRouter()

SERVICE_NAME = "pifah-project-portal"


@router.get("/health")
async def health_check():
    """
    Liveness probe. Does not touch the database.

    Returns:
        dict: Status, service name, environment and workflow mode
    """
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "env": config.settings.APP_ENV,
        "strict_transitions": config.settings.STRICT_TRANSITIONS,
    }
