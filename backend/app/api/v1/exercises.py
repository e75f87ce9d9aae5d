import logging
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from app.api.deps import CurrentUser, DbSession
from app.errors import ConflictError
from app.models import Exercise
from app.schemas.enums import SELECTABLE_CATEGORIES, ExerciseCategory
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate
from app.services.catalog import find_exercise_by_name, get_exercise

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_NAME_MESSAGE = "Exercise with this name already exists"


def to_exercise_response(exercise: Exercise) -> ExerciseResponse:
    return ExerciseResponse(
        id=exercise.id,
        name=exercise.name,
        category=ExerciseCategory(exercise.category),
        muscle_groups=exercise.muscle_groups,
        description=exercise.description,
    )


async def _ensure_name_available(db: DbSession, name: str, exclude_id: UUID | None = None) -> None:
    duplicate = await find_exercise_by_name(db, name)
    if duplicate is not None and duplicate.id != exclude_id:
        raise ConflictError(DUPLICATE_NAME_MESSAGE)


@router.get("", response_model=list[ExerciseResponse])
async def list_exercises(db: DbSession) -> list[ExerciseResponse]:
    result = await db.execute(select(Exercise).order_by(Exercise.name.asc()))
    return [to_exercise_response(exercise) for exercise in result.scalars().all()]


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    """Categories a client may choose when creating an exercise."""
    return [category.value for category in SELECTABLE_CATEGORIES]


@router.get("/{exercise_id}", response_model=ExerciseResponse)
async def get_exercise_by_id(exercise_id: UUID, db: DbSession) -> ExerciseResponse:
    return to_exercise_response(await get_exercise(db, exercise_id))


@router.post("", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
async def create_exercise(
    exercise_in: ExerciseCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ExerciseResponse:
    """Add an exercise to the catalog. Names are unique, ignoring case."""
    await _ensure_name_available(db, exercise_in.name)

    exercise = Exercise(
        name=exercise_in.name,
        category=exercise_in.category.value,
        muscle_groups=exercise_in.muscle_groups,
        description=exercise_in.description,
    )
    db.add(exercise)
    await db.commit()
    return to_exercise_response(exercise)


@router.put("/{exercise_id}", response_model=ExerciseResponse)
async def update_exercise(
    exercise_id: UUID,
    exercise_update: ExerciseUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ExerciseResponse:
    """Replace an exercise. Existing workout logs keep their own copy."""
    exercise = await get_exercise(db, exercise_id)
    await _ensure_name_available(db, exercise_update.name, exclude_id=exercise.id)

    exercise.name = exercise_update.name
    exercise.category = exercise_update.category.value
    exercise.muscle_groups = exercise_update.muscle_groups
    exercise.description = exercise_update.description

    await db.commit()
    return to_exercise_response(exercise)


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(
    exercise_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """Delete an exercise and every planned execution that uses it."""
    exercise = await get_exercise(db, exercise_id)
    await db.delete(exercise)
    await db.commit()
    logger.info("Exercise deleted", extra={"exercise_id": str(exercise_id)})
