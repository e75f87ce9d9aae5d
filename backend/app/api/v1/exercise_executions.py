import logging
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from app.api.deps import CurrentUser, DbSession
from app.errors import ConflictError, InvalidOperationError
from app.models import ExerciseExecution
from app.schemas.exercise_execution import (
    ExerciseExecutionCreate,
    ExerciseExecutionResponse,
    ExerciseExecutionUpdate,
)
from app.services.catalog import (
    enumerate_executions_of_session,
    get_execution,
    get_exercise,
    get_session,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_EXERCISE_MESSAGE = "Exercise already exists in this session"


def to_execution_response(execution: ExerciseExecution) -> ExerciseExecutionResponse:
    return ExerciseExecutionResponse(
        id=execution.id,
        planned_sets=execution.planned_sets,
        planned_reps=execution.planned_reps,
        planned_weight=execution.planned_weight,
        order_id=execution.order_id,
        session_id=execution.session.id,
        session_name=execution.session.name,
        exercise_id=execution.exercise.id,
        exercise_name=execution.exercise.name,
    )


def validate_planned_values(
    planned_sets: int | None,
    planned_reps: int | None,
    planned_weight: int | None,
) -> None:
    if planned_sets is not None and planned_sets < 1:
        raise InvalidOperationError("Planned sets must be greater than 0")
    if planned_reps is not None and planned_reps < 1:
        raise InvalidOperationError("Planned reps must be greater than 0")
    if planned_weight is not None and planned_weight < 0:
        raise InvalidOperationError("Planned weight cannot be negative")


@router.get("", response_model=list[ExerciseExecutionResponse])
async def list_executions(
    db: DbSession,
    session_id: UUID | None = Query(None, alias="sessionId"),
) -> list[ExerciseExecutionResponse]:
    if session_id is not None:
        executions = await enumerate_executions_of_session(db, session_id)
    else:
        result = await db.execute(select(ExerciseExecution))
        executions = list(result.scalars().all())
    return [to_execution_response(execution) for execution in executions]


@router.get("/{execution_id}", response_model=ExerciseExecutionResponse)
async def get_execution_by_id(execution_id: UUID, db: DbSession) -> ExerciseExecutionResponse:
    return to_execution_response(await get_execution(db, execution_id))


@router.post("", response_model=ExerciseExecutionResponse, status_code=status.HTTP_201_CREATED)
async def create_execution(
    execution_in: ExerciseExecutionCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> ExerciseExecutionResponse:
    """Plan an exercise inside a session.

    Without an ``orderId`` the execution goes after the last one.
    """
    validate_planned_values(
        execution_in.planned_sets, execution_in.planned_reps, execution_in.planned_weight
    )
    session = await get_session(db, execution_in.session_id)
    exercise = await get_exercise(db, execution_in.exercise_id)
    siblings = await enumerate_executions_of_session(db, session.id)

    if any(sibling.exercise_id == exercise.id for sibling in siblings):
        raise ConflictError(DUPLICATE_EXERCISE_MESSAGE)

    order_id = execution_in.order_id
    if order_id is None:
        order_id = max((sibling.order_id for sibling in siblings), default=0) + 1
    elif any(sibling.order_id == order_id for sibling in siblings):
        raise ConflictError(f"Order {order_id} is already used in this session")

    execution = ExerciseExecution(
        session=session,
        exercise=exercise,
        planned_sets=execution_in.planned_sets,
        planned_reps=execution_in.planned_reps,
        planned_weight=execution_in.planned_weight,
        order_id=order_id,
    )
    db.add(execution)
    await db.commit()
    return to_execution_response(execution)


@router.put("/{execution_id}", response_model=ExerciseExecutionResponse)
async def update_execution(
    execution_id: UUID,
    execution_update: ExerciseExecutionUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> ExerciseExecutionResponse:
    """Partial update. Moving to an order held by a sibling swaps the two."""
    validate_planned_values(
        execution_update.planned_sets,
        execution_update.planned_reps,
        execution_update.planned_weight,
    )
    execution = await get_execution(db, execution_id)
    siblings = [
        sibling
        for sibling in await enumerate_executions_of_session(db, execution.session_id)
        if sibling.id != execution.id
    ]

    if execution_update.exercise_id is not None and execution_update.exercise_id != execution.exercise_id:
        exercise = await get_exercise(db, execution_update.exercise_id)
        if any(sibling.exercise_id == exercise.id for sibling in siblings):
            raise ConflictError(DUPLICATE_EXERCISE_MESSAGE)
        execution.exercise = exercise

    new_order = execution_update.order_id
    if new_order is not None and new_order != execution.order_id:
        holder = next((sibling for sibling in siblings if sibling.order_id == new_order), None)
        if holder is not None:
            holder.order_id = execution.order_id
        execution.order_id = new_order

    if execution_update.planned_sets is not None:
        execution.planned_sets = execution_update.planned_sets
    if execution_update.planned_reps is not None:
        execution.planned_reps = execution_update.planned_reps
    if execution_update.planned_weight is not None:
        execution.planned_weight = execution_update.planned_weight

    await db.commit()
    return to_execution_response(execution)


@router.delete("/{execution_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_execution(
    execution_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    execution = await get_execution(db, execution_id)
    await db.delete(execution)
    await db.commit()
    logger.info("Exercise execution deleted", extra={"execution_id": str(execution_id)})
