import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "campushub-test-secret")

import uuid

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from campushub.core.db import Base, get_db
from campushub.core.security import create_access_token
from campushub.db.models import User, Discussion, Project, ProjectUpdate, Notification
from campushub.domains.collaboration.entities import TeamMember, TeamRole


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'campushub.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(session):
    async def _make_user(name: str) -> uuid.UUID:
        user = User(email=f"{name.lower()}@campus.test", name=name, profile_picture=f"/avatars/{name.lower()}.png")
        session.add(user)
        await session.commit()
        return user.uuid
    return _make_user


@pytest.fixture
async def owner_id(make_user):
    return await make_user("Asha")


@pytest.fixture
async def discussion_id(session, owner_id):
    discussion = Discussion(title="Best way to learn Rust?", content="Looking for resources", author_id=owner_id)
    session.add(discussion)
    await session.commit()
    return discussion.uuid


@pytest.fixture
def make_project(session, owner_id):
    async def _make_project(looking_for_teammates: bool = True) -> uuid.UUID:
        project = Project(
            title="Campus Rideshare",
            description="Carpooling for students",
            owner_id=owner_id,
            looking_for_teammates=looking_for_teammates,
            team_members=[TeamMember(user_id=owner_id, role=TeamRole.OWNER).to_dict()]
        )
        session.add(project)
        await session.commit()
        return project.uuid
    return _make_project


@pytest.fixture
async def project_id(make_project):
    return await make_project()


@pytest.fixture
async def project_update_id(session, project_id, owner_id):
    update = ProjectUpdate(project_id=project_id, author_id=owner_id, title="MVP shipped", content="First release")
    session.add(update)
    await session.commit()
    return update.uuid


@pytest.fixture
def count_notifications(session_factory):
    async def _count(recipient_id: uuid.UUID) -> int:
        async with session_factory() as session:
            result = await session.execute(
                select(func.count(Notification.uuid)).where(Notification.recipient_id == recipient_id)
            )
            return result.scalar()
    return _count


@pytest.fixture
async def client(session_factory):
    from campushub.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _auth_headers(user_id: uuid.UUID) -> dict:
        token = create_access_token({"sub": str(user_id)})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
