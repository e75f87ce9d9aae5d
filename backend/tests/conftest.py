"""Shared fixtures: an in-memory database per test, an API client and two users."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.database import Base
from app.main import app
from app.models import Exercise, ExerciseExecution, Plan, TrainingSession, User
from app.services.passwords import hash_password

ALICE = ("alice", "alice-password")
BOB = ("bob", "bob-password")


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        from app import models  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _create_user(db: AsyncSession, username: str, password: str) -> User:
    user = User(username=username, password_hash=hash_password(password))
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def alice(db_session: AsyncSession) -> User:
    return await _create_user(db_session, *ALICE)


@pytest_asyncio.fixture
async def bob(db_session: AsyncSession) -> User:
    return await _create_user(db_session, *BOB)


@pytest.fixture
def alice_auth(alice: User) -> tuple[str, str]:
    return ALICE


@pytest.fixture
def bob_auth(bob: User) -> tuple[str, str]:
    return BOB


@pytest_asyncio.fixture
async def catalog(db_session: AsyncSession) -> dict:
    """A plan with one two-exercise session and one empty session."""
    bench = Exercise(
        name="Bench Press",
        category="FreeWeight",
        muscle_groups=["Chest", "Triceps"],
        description="Barbell bench press",
    )
    squat = Exercise(name="Squat", category="FreeWeight", muscle_groups=["Quadriceps", "Glutes"])
    plan = Plan(name="Strength", description="Three day strength block")
    day_a = TrainingSession(name="Day A", order_id=1, plan=plan)
    day_a.exercise_executions = [
        ExerciseExecution(exercise=squat, planned_sets=5, planned_reps=5, planned_weight=100, order_id=1),
        ExerciseExecution(exercise=bench, planned_sets=3, planned_reps=8, planned_weight=60, order_id=2),
    ]
    empty = TrainingSession(name="Rest Day", order_id=2, plan=plan, exercise_executions=[])
    db_session.add_all([bench, squat, plan, day_a, empty])
    await db_session.commit()

    return {
        "bench": bench,
        "squat": squat,
        "plan": plan,
        "session": day_a,
        "empty_session": empty,
    }
