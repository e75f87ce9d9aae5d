from uuid import UUID

from fastapi import APIRouter, Query, status

from app.api.deps import CurrentPrincipal, DbSession
from app.schemas.execution_log import ExecutionLogResponse, ExecutionLogUpdate
from app.services.execution_logs import ExecutionLogService

router = APIRouter()


@router.get("", response_model=list[ExecutionLogResponse])
async def list_execution_logs(
    principal: CurrentPrincipal,
    db: DbSession,
    session_log_id: UUID | None = Query(None, alias="sessionLogId"),
) -> list[ExecutionLogResponse]:
    """List the caller's execution logs, optionally of one session log."""
    return await ExecutionLogService(db).list_logs(principal, session_log_id)


@router.get("/{execution_log_id}", response_model=ExecutionLogResponse)
async def get_execution_log(
    execution_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> ExecutionLogResponse:
    return await ExecutionLogService(db).get(execution_log_id, principal)


@router.put("/{execution_log_id}", response_model=ExecutionLogResponse)
async def update_execution_log(
    execution_log_id: UUID,
    execution_log_update: ExecutionLogUpdate,
    principal: CurrentPrincipal,
    db: DbSession,
) -> ExecutionLogResponse:
    """Record actual sets/reps/weight, completion and notes for one exercise."""
    return await ExecutionLogService(db).update(execution_log_id, execution_log_update, principal)


@router.delete("/{execution_log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_execution_log(
    execution_log_id: UUID,
    principal: CurrentPrincipal,
    db: DbSession,
) -> None:
    await ExecutionLogService(db).delete(execution_log_id, principal)
