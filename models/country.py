"""Country model - static reference data for the map."""

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import JSON, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class CountryRegion(str, enum.Enum):
    """Geographic region of a country, used for map coloring."""

    NORTH = "North"
    WEST = "West"
    EAST = "East"
    CENTRAL = "Central"
    SOUTH = "South"


class Country(Base):
    """Country ORM model."""

    __tablename__ = "countries"

    # Lower-case ISO 3166 alpha-2 code, e.g. "ke"
    id: Mapped[str] = mapped_column(String(8), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    capital: Mapped[str] = mapped_column(String(255), nullable=False)
    population: Mapped[int] = mapped_column(BigInteger, nullable=False)
    area: Mapped[int] = mapped_column(Integer, nullable=False)
    region: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    gdp: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    languages: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)


# Pydantic schemas
class CountryBase(BaseModel):
    """Base country schema."""

    name: str = Field(min_length=1, max_length=255)
    capital: str = Field(min_length=1, max_length=255)
    population: int = Field(ge=0)
    area: int = Field(ge=0)
    region: CountryRegion
    gdp: int | None = None
    languages: list[str] | None = None


class CountryCreate(CountryBase):
    """Schema for creating a country."""

    id: str = Field(min_length=2, max_length=8)


class CountryUpdate(BaseModel):
    """Schema for updating a country (all fields optional)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    capital: str | None = Field(default=None, min_length=1, max_length=255)
    population: int | None = Field(default=None, ge=0)
    area: int | None = Field(default=None, ge=0)
    region: CountryRegion | None = None
    gdp: int | None = None
    languages: list[str] | None = None


class CountryResponse(CountryBase):
    """Schema for country response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
