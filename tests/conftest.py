"""Pytest configuration and fixtures."""

import asyncio
import sys
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from auth.jwt import create_access_token
from db import Base
from main import app
from models.project import Project, ProjectStatus
from models.user import Role, User

# Fix Windows asyncio event loop
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# In-memory SQLite; StaticPool keeps the single connection alive for the whole test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create a test database session on a fresh schema."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestSessionLocal = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    await test_engine.dispose()


@pytest.fixture
def override_get_db(db_session):
    """Override get_db dependency for testing."""
    from api.deps import get_db

    async def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(override_get_db):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def create_user(db_session):
    """Factory fixture: persist a user with the given role."""
    async def _create_user(role: Role = Role.PUBLIC, email: str | None = None, is_active: bool = True):
        user = User(
            id=uuid4(),
            email=email or f"{role.value}-{uuid4().hex[:8]}@example.org",
            name=f"Test {role.value.replace('_', ' ').title()}",
            role=role.value,
            is_active=is_active,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
    return _create_user


@pytest_asyncio.fixture
async def public_user(create_user):
    return await create_user(Role.PUBLIC, email="submitter@example.org")


@pytest_asyncio.fixture
async def other_public_user(create_user):
    return await create_user(Role.PUBLIC, email="someone-else@example.org")


@pytest_asyncio.fixture
async def focal_user(create_user):
    return await create_user(Role.FOCAL_PERSON, email="focal@example.org")


@pytest_asyncio.fixture
async def approver_user(create_user):
    return await create_user(Role.APPROVER, email="approver@example.org")


@pytest_asyncio.fixture
async def admin_user(create_user):
    return await create_user(Role.ADMIN, email="admin@example.org")


def make_auth_headers(user: User) -> dict:
    """
    Helper function to create auth headers for a user.

    Args:
        user: User the token is issued for (its current role goes in the token)

    Returns:
        Headers dict with Authorization
    """
    token = create_access_token(user_id=user.id, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Factory fixture returning make_auth_headers."""
    return make_auth_headers


@pytest.fixture
def project_payload():
    """Factory fixture: a valid submission body, with overrides."""
    def _payload(**overrides) -> dict:
        payload = {
            "project_title": "Regional Oxygen Plant",
            "project_summary": "Medical oxygen production for district hospitals.",
            "country": "Kenya",
            "region": "East Africa",
            "implementing_entity": "Ministry of Health",
            "project_type": "Greenfield",
            "contact_person": "Jane Wanjiru",
            "contact_details": "jane@example.org",
            "project_description": "Build and operate a PSA oxygen plant.",
            "pifah_pillar": "Health Infrastructure",
            "current_stage": "Feasibility Study",
            "contribution_areas": ["Job creation"],
            "support_required": ["Financing"],
        }
        payload.update(overrides)
        return payload
    return _payload


@pytest.fixture
def create_project(db_session):
    """Factory fixture: insert a project directly with the given status."""
    async def _create_project(
        submitter: User,
        *,
        country: str = "Kenya",
        pillar: str = "Health Infrastructure",
        status: ProjectStatus = ProjectStatus.PENDING,
        title: str | None = None,
    ) -> Project:
        project = Project(
            id=uuid4(),
            submitted_by=submitter.id,
            project_title=title or f"{pillar} project in {country}",
            project_summary="Summary",
            country=country,
            region="East Africa",
            implementing_entity="Ministry of Health",
            project_type="Greenfield",
            contact_person="Contact",
            contact_details="contact@example.org",
            project_description="Description",
            pifah_pillar=pillar,
            current_stage="Concept",
            contribution_areas=[],
            support_required=[],
            status=status.value,
        )
        db_session.add(project)
        await db_session.commit()
        await db_session.refresh(project)
        return project
    return _create_project
