"""Main API router that includes versioned routers."""

from fastapi import APIRouter

from api.v1 import auth, countries, health, notifications, projects, reference, settings, statistics, users

# Main API router
api_router = APIRouter()

# Include v1 routers
v1_router = APIRouter(prefix="/v1")
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(auth.router, tags=["auth"])
v1_router.include_router(users.router, tags=["users"])
v1_router.include_router(projects.router, tags=["projects"])
v1_router.include_router(statistics.router, tags=["statistics"])
v1_router.include_router(countries.router, tags=["countries"])
v1_router.include_router(settings.router, tags=["settings"])
v1_router.include_router(notifications.router, tags=["notifications"])
v1_router.include_router(reference.router, tags=["reference"])

api_router.include_router(v1_router)
