"""
Execution log service - reads and edits the per-exercise records of a log.

Execution logs are only ever created by the snapshot builder; this service has
no create operation.
"""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import InvalidOperationError
from app.schemas.execution_log import ExecutionLogResponse, ExecutionLogUpdate
from app.services import log_state
from app.services.identity import resolve_user
from app.services.ownership import OwnershipGate
from app.services.projection import to_execution_log_view

logger = logging.getLogger(__name__)

ACTUAL_FIELDS = {
    "actual_sets": "sets",
    "actual_reps": "reps",
    "actual_weight": "weight",
}


def validate_actual_values(update: ExecutionLogUpdate) -> None:
    """Reject negative actual values before anything is written."""
    for field, label in ACTUAL_FIELDS.items():
        value = getattr(update, field)
        if value is not None and value < 0:
            raise InvalidOperationError(f"actual {label} cannot be negative")


class ExecutionLogService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _gate(self, username: str) -> OwnershipGate:
        owner = await resolve_user(self.db, username)
        return OwnershipGate(self.db, owner)

    async def list_logs(self, username: str, session_log_id: UUID | None = None) -> list[ExecutionLogResponse]:
        gate = await self._gate(username)
        return [to_execution_log_view(log) for log in await gate.execution_logs(session_log_id)]

    async def get(self, execution_log_id: UUID, username: str) -> ExecutionLogResponse:
        gate = await self._gate(username)
        return to_execution_log_view(await gate.execution_log(execution_log_id))

    async def update(
        self,
        execution_log_id: UUID,
        update: ExecutionLogUpdate,
        username: str,
    ) -> ExecutionLogResponse:
        """Partially update actual values, completion flag and notes."""
        gate = await self._gate(username)
        execution_log = await gate.execution_log(execution_log_id)
        log_state.ensure_mutable(execution_log.session_log, "update")
        validate_actual_values(update)

        changes = {
            field: value
            for field, value in update.model_dump(exclude_unset=True).items()
            if value is not None
        }
        for field, value in changes.items():
            setattr(execution_log, field, value)

        await self.db.commit()
        return to_execution_log_view(execution_log)

    async def delete(self, execution_log_id: UUID, username: str) -> None:
        """Remove one execution log; its parent and siblings stay."""
        gate = await self._gate(username)
        execution_log = await gate.execution_log(execution_log_id)
        log_state.ensure_mutable(execution_log.session_log, "delete")

        await self.db.delete(execution_log)
        await self.db.commit()
        logger.info("Execution log deleted", extra={"execution_log_id": str(execution_log_id)})
