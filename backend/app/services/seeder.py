"""
Database seeder - loads the initial exercise/plan/session catalog from YAML.

Only runs against an empty exercise table, so restarts never duplicate data.
"""
import logging
from pathlib import Path

import yaml
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.models import Exercise, ExerciseExecution, Plan, TrainingSession, User
from app.schemas.enums import ExerciseCategory
from app.services.identity import find_user_by_username
from app.services.passwords import hash_password

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "seed_catalog.yaml"


def load_seed_data(path: str | Path | None = None) -> dict:
    """Read the seed catalog; an empty file yields an empty catalog."""
    with open(path or DEFAULT_SEED_FILE, "r") as f:
        return yaml.safe_load(f) or {}


async def seed_catalog(db: AsyncSession, data: dict) -> bool:
    """Insert the catalog described by ``data``. Returns False if data already exists."""
    existing = await db.execute(select(func.count(Exercise.id)))
    if existing.scalar_one() > 0:
        logger.info("Catalog already present, skipping seed")
        return False

    exercises: dict[str, Exercise] = {}
    for item in data.get("exercises", []):
        exercise = Exercise(
            name=item["name"],
            category=ExerciseCategory(item.get("category", ExerciseCategory.UNSPECIFIED.value)).value,
            muscle_groups=list(item.get("muscle_groups", [])),
            description=item.get("description"),
        )
        exercises[exercise.name] = exercise
        db.add(exercise)

    session_count = 0
    for plan_item in data.get("plans", []):
        plan = Plan(name=plan_item["name"], description=plan_item.get("description"))
        db.add(plan)
        for session_item in plan_item.get("sessions", []):
            session = TrainingSession(name=session_item["name"], order_id=session_item["order"], plan=plan)
            session.exercise_executions = [
                ExerciseExecution(
                    exercise=exercises[execution["exercise"]],
                    planned_sets=execution["sets"],
                    planned_reps=execution["reps"],
                    planned_weight=execution["weight"],
                    order_id=position,
                )
                for position, execution in enumerate(session_item.get("executions", []), start=1)
            ]
            db.add(session)
            session_count += 1

    await db.commit()
    logger.info(
        "Catalog seeded",
        extra={"exercises": len(exercises), "plans": len(data.get("plans", [])), "sessions": session_count},
    )
    return True


async def ensure_demo_user(db: AsyncSession, username: str, password: str) -> User:
    """Create the configured demo account if it does not exist yet."""
    user = await find_user_by_username(db, username)
    if user is None:
        user = User(username=username, password_hash=hash_password(password))
        db.add(user)
        await db.commit()
        logger.info("Demo user created", extra={"username": username})
    return user


async def run_seeders(db: AsyncSession) -> None:
    settings = get_settings()
    await seed_catalog(db, load_seed_data(settings.seed_file))
    if settings.demo_username and settings.demo_password:
        await ensure_demo_user(db, settings.demo_username, settings.demo_password)
