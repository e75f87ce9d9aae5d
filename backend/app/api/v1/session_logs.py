from uuid import UUID

from fastapi import APIRouter, Query, status

from app.api.deps import CurrentPrincipal, DbSession
from app.schemas.session_log import SessionLogResponse, SessionLogUpdate
from app.services.session_logs import SessionLogService

router = APIRouter()


@router.post("/start/{session_id}", response_model=SessionLogResponse, status_code=status.HTTP_201_CREATED)
async def start_session_log(
    session_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> SessionLogResponse:
    """Start a workout: snapshot the planned session into a new log."""
    return await SessionLogService(db).start(session_id, principal)


@router.put("/{session_log_id}/complete", response_model=SessionLogResponse)
async def complete_session_log(
    session_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> SessionLogResponse:
    """Mark an in-progress workout as completed."""
    return await SessionLogService(db).complete(session_log_id, principal)


@router.put("/{session_log_id}/cancel", response_model=SessionLogResponse)
async def cancel_session_log(
    session_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> SessionLogResponse:
    """Cancel an in-progress workout."""
    return await SessionLogService(db).cancel(session_log_id, principal)


@router.get("", response_model=list[SessionLogResponse])
async def list_session_logs(
    principal: CurrentPrincipal,
    db: DbSession,
    session_id: UUID | None = Query(None, alias="sessionId"),
) -> list[SessionLogResponse]:
    """List the caller's workout logs, optionally only those of one session."""
    return await SessionLogService(db).list_logs(principal, session_id)


@router.get("/{session_log_id}", response_model=SessionLogResponse)
async def get_session_log(
    session_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> SessionLogResponse:
    return await SessionLogService(db).get(session_log_id, principal)


@router.put("/{session_log_id}", response_model=SessionLogResponse)
async def update_session_log(
    session_log_id: UUID,
    session_log_update: SessionLogUpdate,
    principal: CurrentPrincipal,
    db: DbSession,
) -> SessionLogResponse:
    """Update notes and/or status of an in-progress workout."""
    return await SessionLogService(db).update(session_log_id, session_log_update, principal)


@router.delete("/{session_log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session_log(
    session_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> None:
    """Delete an in-progress workout. Completed and cancelled ones are permanent."""
    await SessionLogService(db).delete(session_log_id, principal)
