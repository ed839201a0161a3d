import os
import uuid
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

# Keep password hashing cheap for the suite; must be set before settings are cached.
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from jobtracker.api.deps import get_db
from jobtracker.main import create_app
from jobtracker.models import Base, Job, User
from jobtracker.services.auth_service import hash_password

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

API = "/api/v1"
PASSWORD = "secret123"


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture
async def test_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession]:
    """Provide a transactional session that rolls back after each test."""
    connection = await test_engine.connect()
    transaction = await connection.begin()
    session = AsyncSession(bind=connection, expire_on_commit=False)

    yield session

    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture
def app(db_session) -> FastAPI:
    app = create_app()

    # The test session is yielded as-is; the fixture owns commit and rollback
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    return app


def make_client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    async with make_client(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_client(client) -> AsyncClient:
    """A client holding the session cookie of a freshly registered user."""
    await register(client)
    return client


@pytest_asyncio.fixture
async def other_client(app) -> AsyncGenerator[AsyncClient]:
    """A second, independent user."""
    async with make_client(app) as ac:
        await register(ac, name="Mallory")
        yield ac


@pytest_asyncio.fixture
async def owner(db_session) -> User:
    return await make_user(db_session, name="Owner")


@pytest_asyncio.fixture
async def stranger(db_session) -> User:
    return await make_user(db_session, name="Stranger")


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}.{uuid.uuid4().hex[:8]}@example.com"


async def register(client: AsyncClient, **overrides) -> dict:
    """POST /auth/register and return the parsed JSON response."""
    payload = {"name": "Alice", "email": unique_email(), "password": PASSWORD}
    payload.update(overrides)
    resp = await client.post(f"{API}/auth/register", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def make_user(db: AsyncSession, **overrides) -> User:
    data = {
        "name": "Tester",
        "email": unique_email("tester"),
        "password_hash": hash_password(PASSWORD),
    }
    data.update(overrides)
    user = User(**data)
    db.add(user)
    await db.flush()
    return user


async def insert_job(db: AsyncSession, owner_id: uuid.UUID, **overrides) -> Job:
    """Insert a job row directly, bypassing the command handlers."""
    data = {"position": "Engineer", "company": "Acme", "owner_id": owner_id}
    data.update(overrides)
    job = Job(**data)
    db.add(job)
    await db.flush()
    return job


def future(days: int = 7) -> datetime:
    return datetime.now(UTC) + timedelta(days=days)


def make_job_payload(**overrides):
    """Helper to create a valid job payload in wire (camelCase) form."""
    data = {
        "position": "Software Engineer",
        "company": "Acme",
        "jobLocation": "Berlin",
        "jobStatus": "pending",
        "jobType": "full-time",
        "recruiter": "Jane Roe",
        "recruiterEmail": "jane.roe@example.com",
        "salaryMin": 50000,
        "salaryMax": 70000,
        "priority": "Medium",
    }
    data.update(overrides)
    return data
