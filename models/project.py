"""Project model - a health-sector investment proposal."""

import enum
from datetime import datetime, UTC
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


class ProjectStatus(str, enum.Enum):
    """Workflow status of a project."""

    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class Pillar(str, enum.Enum):
    """PIFAH investment pillar."""

    HEALTH_INFRASTRUCTURE = "Health Infrastructure"
    LOCAL_MANUFACTURING = "Local Manufacturing"
    DIAGNOSTICS_IMAGING = "Diagnostics & Imaging"
    DIGITAL_HEALTH_AI = "Digital Health & AI"
    HUMAN_CAPITAL = "Human Capital Development"


class ProjectRegion(str, enum.Enum):
    """Region label chosen by the submitter."""

    NORTH_AFRICA = "North Africa"
    WEST_AFRICA = "West Africa"
    EAST_AFRICA = "East Africa"
    CENTRAL_AFRICA = "Central Africa"
    SOUTHERN_AFRICA = "Southern Africa"


class ProjectStage(str, enum.Enum):
    """Implementation readiness stage."""

    CONCEPT = "Concept"
    FEASIBILITY_STUDY = "Feasibility Study"
    DETAILED_DESIGN = "Detailed Design"
    PILOT_RUNNING = "Pilot Running"
    READY_FOR_SCALE_UP = "Ready for Scale-Up"


class Project(Base):
    """Project ORM model - an investment proposal moving through review and approval."""

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
        index=True,
    )
    submitted_by: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # General information
    project_title: Mapped[str] = mapped_column(String(500), nullable=False)
    project_summary: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(50), nullable=False)
    implementing_entity: Mapped[str] = mapped_column(String(500), nullable=False)
    ppp_model: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    project_type: Mapped[str] = mapped_column(String(255), nullable=False)
    project_website: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    contact_person: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_details: Mapped[str] = mapped_column(String(500), nullable=False)

    # Strategic rationale
    project_description: Mapped[str] = mapped_column(Text, nullable=False)
    pifah_pillar: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    alignment_to_national_priorities: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    regional_integration_potential: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    regional_integration_details: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Market opportunity
    market_size: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    target_population: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    existing_solutions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    unique_selling_proposition: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Economic and health impact
    expected_health_outcomes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    economic_benefits: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    social_impact: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contribution_areas: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    contribution_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    environmental_considerations: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Financial information
    estimated_investment: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cost_breakdown: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    current_funding_model: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    proposed_financing_structure: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    expected_return: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Implementation readiness
    current_stage: Mapped[str] = mapped_column(String(50), nullable=False)
    key_milestones: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    government_approvals: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    partnerships: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    regulatory_alignment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Risk and mitigation
    major_risks: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    mitigation_measures: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Timeline
    planned_start_date: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    implementation_horizon: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Support required
    support_required: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    other_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Workflow
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=ProjectStatus.PENDING.value,
        index=True,
    )
    reviewed_by: Mapped[Optional[UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_by: Mapped[Optional[UUID]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )


# Pydantic schemas
class ProjectBase(BaseModel):
    """Base project schema - the proposal payload filled in by the submitter."""

    # General information
    project_title: str = Field(min_length=1, max_length=500)
    project_summary: str = Field(min_length=1)
    country: str = Field(min_length=1, max_length=255)
    region: ProjectRegion
    implementing_entity: str = Field(min_length=1, max_length=500)
    ppp_model: str | None = None
    project_type: str = Field(min_length=1, max_length=255)
    project_website: str | None = None
    contact_person: str = Field(min_length=1, max_length=255)
    contact_details: str = Field(min_length=1, max_length=500)

    # Strategic rationale
    project_description: str = Field(min_length=1)
    pifah_pillar: Pillar
    alignment_to_national_priorities: str | None = None
    regional_integration_potential: bool = False
    regional_integration_details: str | None = None

    # Market opportunity
    market_size: str | None = None
    target_population: str | None = None
    existing_solutions: str | None = None
    unique_selling_proposition: str | None = None

    # Economic and health impact
    expected_health_outcomes: str | None = None
    economic_benefits: str | None = None
    social_impact: str | None = None
    contribution_areas: list[str] = Field(default_factory=list)
    contribution_description: str | None = None
    environmental_considerations: str | None = None

    # Financial information
    estimated_investment: str | None = None
    cost_breakdown: str | None = None
    current_funding_model: str | None = None
    proposed_financing_structure: str | None = None
    expected_return: str | None = None

    # Implementation readiness
    current_stage: ProjectStage
    key_milestones: str | None = None
    government_approvals: bool = False
    partnerships: str | None = None
    regulatory_alignment: str | None = None

    # Risk and mitigation
    major_risks: str | None = None
    mitigation_measures: str | None = None

    # Timeline
    planned_start_date: str | None = None
    implementation_horizon: str | None = None

    support_required: list[str] = Field(default_factory=list)
    other_notes: str | None = None


class ProjectCreate(ProjectBase):
    """Schema for submitting a project.

    Note: status and submitted_by are NOT included - they are set server-side.
    """


class ProjectUpdate(BaseModel):
    """Schema for an administrator's direct edit.

    Every field is optional and only provided fields are written. Workflow
    fields are editable here, which bypasses the state machine.
    """

    project_title: str | None = Field(default=None, min_length=1, max_length=500)
    project_summary: str | None = Field(default=None, min_length=1)
    country: str | None = Field(default=None, min_length=1, max_length=255)
    region: ProjectRegion | None = None
    implementing_entity: str | None = Field(default=None, min_length=1, max_length=500)
    ppp_model: str | None = None
    project_type: str | None = Field(default=None, min_length=1, max_length=255)
    project_website: str | None = None
    contact_person: str | None = Field(default=None, min_length=1, max_length=255)
    contact_details: str | None = Field(default=None, min_length=1, max_length=500)
    project_description: str | None = Field(default=None, min_length=1)
    pifah_pillar: Pillar | None = None
    alignment_to_national_priorities: str | None = None
    regional_integration_potential: bool | None = None
    regional_integration_details: str | None = None
    market_size: str | None = None
    target_population: str | None = None
    existing_solutions: str | None = None
    unique_selling_proposition: str | None = None
    expected_health_outcomes: str | None = None
    economic_benefits: str | None = None
    social_impact: str | None = None
    contribution_areas: list[str] | None = None
    contribution_description: str | None = None
    environmental_considerations: str | None = None
    estimated_investment: str | None = None
    cost_breakdown: str | None = None
    current_funding_model: str | None = None
    proposed_financing_structure: str | None = None
    expected_return: str | None = None
    current_stage: ProjectStage | None = None
    key_milestones: str | None = None
    government_approvals: bool | None = None
    partnerships: str | None = None
    regulatory_alignment: str | None = None
    major_risks: str | None = None
    mitigation_measures: str | None = None
    planned_start_date: str | None = None
    implementation_horizon: str | None = None
    support_required: list[str] | None = None
    other_notes: str | None = None

    # Workflow fields (administrator bypass)
    status: ProjectStatus | None = None
    reviewed_by: UUID | None = None
    reviewed_at: datetime | None = None
    approved_by: UUID | None = None
    approved_at: datetime | None = None


class ProjectDecision(BaseModel):
    """Body of the approve/reject call."""

    approved: bool


class ProjectResponse(ProjectBase):
    """Schema for project response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    submitted_by: UUID
    status: ProjectStatus
    reviewed_by: UUID | None = None
    reviewed_at: datetime | None = None
    approved_by: UUID | None = None
    approved_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class PublicProjectSummary(BaseModel):
    """What anonymous visitors may see of an approved project."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_title: str
    project_summary: str
    country: str
    region: str
    pifah_pillar: str
    implementing_entity: str
    approved_at: datetime | None = None
