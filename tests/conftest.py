"""Pytest configuration for all tests."""

import uuid
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from companykit.core.config import Settings
from companykit.core.hooks import HookRegistry
from companykit.domain.services.role_registry import RoleRegistry
from companykit.infrastructure.persistence.database import Base
from companykit.infrastructure.persistence.models import (
    CompanyInvitationModel,
    CompanyModel,
    MembershipModel,
    UserModel,
)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, environment="testing")


@pytest.fixture
def roles(settings: Settings) -> RoleRegistry:
    """Registry holding the default admin and editor roles."""
    return RoleRegistry.from_settings(settings)


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def collaborators(settings, roles, hooks) -> dict:
    """Keyword arguments shared by the actions and the component under test."""
    return {"settings": settings, "roles": roles, "hooks": hooks}


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    # Create in-memory SQLite database
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session
    async_session_maker = sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def make_user(db_session: AsyncSession):
    """Factory persisting a user."""

    async def _make(name: str, email: str) -> UserModel:
        user = UserModel(id=str(uuid.uuid4()), name=name, email=email)
        db_session.add(user)
        await db_session.flush()
        return user

    return _make


@pytest.fixture
def make_company(db_session: AsyncSession):
    """Factory persisting a company owned by a user."""

    async def _make(owner: UserModel, name: str, personal: bool = False) -> CompanyModel:
        company = CompanyModel(
            id=str(uuid.uuid4()),
            user_id=owner.id,
            name=name,
            personal_company=personal,
        )
        db_session.add(company)
        await db_session.flush()
        await db_session.refresh(company, ["owner", "memberships", "invitations"])
        return company

    return _make


@pytest.fixture
def add_member(db_session: AsyncSession):
    """Factory attaching a user to a company under a role."""

    async def _add(company: CompanyModel, user: UserModel, role: str | None) -> MembershipModel:
        membership = MembershipModel(company_id=company.id, user_id=user.id, role=role)
        db_session.add(membership)
        await db_session.flush()
        return membership

    return _add


@pytest.fixture
def make_invitation(db_session: AsyncSession):
    """Factory persisting a pending invitation."""

    async def _make(
        company: CompanyModel, email: str, role: str | None = "editor"
    ) -> CompanyInvitationModel:
        invitation = CompanyInvitationModel(
            id=str(uuid.uuid4()), company_id=company.id, email=email, role=role
        )
        db_session.add(invitation)
        await db_session.flush()
        return invitation

    return _make


@pytest_asyncio.fixture
async def owner(make_user) -> UserModel:
    return await make_user("Taylor Otwell", "taylor@example.com")


@pytest_asyncio.fixture
async def employee(make_user) -> UserModel:
    return await make_user("Adam Wathan", "adam@example.com")


@pytest_asyncio.fixture
async def company(make_company, owner) -> CompanyModel:
    return await make_company(owner, "Laravel LLC")
