import logging
from uuid import UUID

from fastapi import APIRouter, Query, status
from sqlalchemy import select

from app.api.deps import CurrentUser, DbSession, OptionalUser
from app.api.v1.exercise_executions import to_execution_response
from app.models import TrainingSession
from app.schemas.training_session import (
    TrainingSessionCreate,
    TrainingSessionResponse,
    TrainingSessionUpdate,
)
from app.services.catalog import get_plan, get_session, list_plan_sessions
from app.services.ownership import count_session_logs
from app.services.session_placement import ensure_order_in_range, ensure_placement, next_order

logger = logging.getLogger(__name__)

router = APIRouter()


def to_session_response(session: TrainingSession, session_log_count: int = 0) -> TrainingSessionResponse:
    executions = sorted(session.exercise_executions, key=lambda e: e.order_id)
    return TrainingSessionResponse(
        id=session.id,
        name=session.name,
        plan_id=session.plan_id,
        order_id=session.order_id,
        exercise_executions_count=len(executions),
        session_log_count=session_log_count,
        exercise_executions=[to_execution_response(execution) for execution in executions],
    )


async def _validate_placement(
    db: DbSession,
    plan_id: UUID,
    name: str,
    order_id: int | None,
    exclude_id: UUID | None = None,
) -> int:
    """Check capacity, name and order rules of a plan; returns the order to use."""
    await get_plan(db, plan_id)
    siblings = [s for s in await list_plan_sessions(db, plan_id) if s.id != exclude_id]

    if order_id is None:
        order_id = next_order(siblings)
    ensure_placement(siblings, name, order_id)
    return order_id


@router.get("", response_model=list[TrainingSessionResponse])
async def list_sessions(
    db: DbSession,
    current_user: OptionalUser,
    plan_id: UUID | None = Query(None, alias="planId"),
) -> list[TrainingSessionResponse]:
    query = select(TrainingSession)
    if plan_id is not None:
        query = query.where(TrainingSession.plan_id == plan_id)
    result = await db.execute(query.order_by(TrainingSession.order_id.asc(), TrainingSession.name.asc()))
    sessions = list(result.scalars().all())

    counts = await count_session_logs(db, current_user, [s.id for s in sessions])
    return [to_session_response(s, counts[s.id]) for s in sessions]


@router.get("/{session_id}", response_model=TrainingSessionResponse)
async def get_session_by_id(
    session_id: UUID,
    db: DbSession,
    current_user: OptionalUser,
) -> TrainingSessionResponse:
    session = await get_session(db, session_id)
    counts = await count_session_logs(db, current_user, [session.id])
    return to_session_response(session, counts[session.id])


@router.post("", response_model=TrainingSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    session_in: TrainingSessionCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> TrainingSessionResponse:
    order_id = await _validate_placement(db, session_in.plan_id, session_in.name, session_in.order_id)

    session = TrainingSession(
        plan_id=session_in.plan_id,
        name=session_in.name,
        order_id=order_id,
        exercise_executions=[],
    )
    db.add(session)
    await db.commit()
    return to_session_response(session)


@router.put("/{session_id}", response_model=TrainingSessionResponse)
async def update_session(
    session_id: UUID,
    session_update: TrainingSessionUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> TrainingSessionResponse:
    """Rename, reorder or move a session to another plan."""
    session = await get_session(db, session_id)
    plan_id = session_update.plan_id or session.plan_id
    order_id = session_update.order_id
    if order_id is None and plan_id == session.plan_id:
        order_id = session.order_id

    if plan_id is not None:
        order_id = await _validate_placement(
            db, plan_id, session_update.name, order_id, exclude_id=session.id
        )
    elif order_id is not None:
        ensure_order_in_range(order_id)

    session.plan_id = plan_id
    session.name = session_update.name
    if order_id is not None:
        session.order_id = order_id

    await db.commit()

    counts = await count_session_logs(db, current_user, [session.id])
    return to_session_response(session, counts[session.id])


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """Delete a session with its planned executions. Logs started from it remain."""
    session = await get_session(db, session_id)
    await db.delete(session)
    await db.commit()
    logger.info("Session deleted", extra={"session_id": str(session_id)})
