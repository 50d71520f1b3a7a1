"""Database models."""

from db import Base

# Import all models so Alembic can detect them
from models.user import User
from models.country import Country
from models.project import Project
from models.notification import Notification
from models.app_settings import AppSettings, RegionColor

__all__ = [
    "Base",
    "User",
    "Country",
    "Project",
    "Notification",
    "AppSettings",
    "RegionColor",
]
