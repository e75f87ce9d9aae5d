"""
Read access to the planning catalog (exercises, plans, sessions, executions).

The workout log subsystem only reads through these helpers; it never mutates
catalog rows.
"""
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.models import Exercise, ExerciseExecution, Plan, TrainingSession


async def find_exercise_by_id(db: AsyncSession, exercise_id: UUID) -> Exercise | None:
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    return result.scalar_one_or_none()


async def find_exercise_by_name(db: AsyncSession, name: str) -> Exercise | None:
    """Case-insensitive lookup."""
    result = await db.execute(select(Exercise).where(func.lower(Exercise.name) == name.lower()))
    return result.scalars().first()


async def find_plan_by_id(db: AsyncSession, plan_id: UUID) -> Plan | None:
    result = await db.execute(select(Plan).where(Plan.id == plan_id))
    return result.scalar_one_or_none()


async def find_plan_by_name(db: AsyncSession, name: str) -> Plan | None:
    """Case-insensitive lookup."""
    result = await db.execute(select(Plan).where(func.lower(Plan.name) == name.lower()))
    return result.scalars().first()


async def find_session_by_id(db: AsyncSession, session_id: UUID) -> TrainingSession | None:
    result = await db.execute(select(TrainingSession).where(TrainingSession.id == session_id))
    return result.scalar_one_or_none()


async def list_plan_sessions(db: AsyncSession, plan_id: UUID) -> list[TrainingSession]:
    result = await db.execute(
        select(TrainingSession)
        .where(TrainingSession.plan_id == plan_id)
        .order_by(TrainingSession.order_id.asc())
    )
    return list(result.scalars().all())


async def find_execution_by_id(db: AsyncSession, execution_id: UUID) -> ExerciseExecution | None:
    result = await db.execute(select(ExerciseExecution).where(ExerciseExecution.id == execution_id))
    return result.scalar_one_or_none()


async def enumerate_executions_of_session(db: AsyncSession, session_id: UUID) -> list[ExerciseExecution]:
    """Planned executions of a session in ascending planned order."""
    result = await db.execute(
        select(ExerciseExecution)
        .where(ExerciseExecution.session_id == session_id)
        .order_by(ExerciseExecution.order_id.asc())
    )
    return list(result.scalars().all())


async def get_exercise(db: AsyncSession, exercise_id: UUID) -> Exercise:
    exercise = await find_exercise_by_id(db, exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise not found")
    return exercise


async def get_plan(db: AsyncSession, plan_id: UUID) -> Plan:
    plan = await find_plan_by_id(db, plan_id)
    if plan is None:
        raise NotFoundError("Plan not found")
    return plan


async def get_session(db: AsyncSession, session_id: UUID) -> TrainingSession:
    session = await find_session_by_id(db, session_id)
    if session is None:
        raise NotFoundError("Session not found")
    return session


async def get_execution(db: AsyncSession, execution_id: UUID) -> ExerciseExecution:
    execution = await find_execution_by_id(db, execution_id)
    if execution is None:
        raise NotFoundError("Exercise execution not found")
    return execution
