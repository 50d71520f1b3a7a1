"""Display settings: region colors and application branding."""

from datetime import datetime, UTC
from typing import Optional

from pydantic import BaseModel, ConfigDict
from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class RegionColor(Base):
    """Map color for one country region."""

    __tablename__ = "region_colors"

    region: Mapped[str] = mapped_column(String(20), primary_key=True)
    color: Mapped[str] = mapped_column(String(100), nullable=False)


class AppSettings(Base):
    """Branding settings. The table holds a single row with id "default"."""

    __tablename__ = "app_settings"

    id: Mapped[str] = mapped_column(String(50), primary_key=True, default="default")
    # URL or data URL of an uploaded image; upload storage lives elsewhere
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    banner_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


# Pydantic schemas
class RegionColors(BaseModel):
    """Colors for all five regions. Every region is required on write."""

    North: str
    West: str
    East: str
    Central: str
    South: str


class AppSettingsUpdate(BaseModel):
    """Schema for updating branding settings (only provided fields are written)."""

    logo_url: str | None = None
    banner_image_url: str | None = None


class AppSettingsResponse(BaseModel):
    """Schema for branding settings response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    logo_url: str | None = None
    banner_image_url: str | None = None
