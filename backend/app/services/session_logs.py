"""
Session log service - starts, transitions, reads and deletes workout logs.

Every operation resolves the principal to a user first and goes through the
ownership gate; each mutation commits as one transaction.
"""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import NotFoundError
from app.schemas.session_log import SessionLogResponse, SessionLogUpdate
from app.services import log_state
from app.services.catalog import enumerate_executions_of_session, find_session_by_id
from app.services.clock import Clock, utcnow
from app.services.identity import resolve_user
from app.services.ownership import OwnershipGate
from app.services.projection import to_session_log_view
from app.services.snapshot import build_session_log

logger = logging.getLogger(__name__)


class SessionLogService:
    """Workout log life cycle on behalf of an authenticated principal."""

    def __init__(self, db: AsyncSession, clock: Clock = utcnow):
        self.db = db
        self.clock = clock

    async def _gate(self, username: str) -> OwnershipGate:
        owner = await resolve_user(self.db, username)
        return OwnershipGate(self.db, owner)

    async def start(self, session_id: UUID, username: str) -> SessionLogResponse:
        """Snapshot a planned session into a new in-progress log owned by ``username``."""
        owner = await resolve_user(self.db, username)

        session = await find_session_by_id(self.db, session_id)
        if session is None:
            raise NotFoundError("Session not found")

        executions = await enumerate_executions_of_session(self.db, session_id)
        session_log = build_session_log(session, executions, owner, self.clock())

        self.db.add(session_log)
        await self.db.commit()

        logger.info(
            "Session log started",
            extra={
                "session_log_id": str(session_log.id),
                "session_id": str(session_id),
                "user_id": str(owner.id),
                "execution_logs": len(session_log.execution_logs),
            },
        )
        return to_session_log_view(session_log)

    async def complete(self, session_log_id: UUID, username: str) -> SessionLogResponse:
        gate = await self._gate(username)
        session_log = await gate.session_log(session_log_id)
        log_state.complete(session_log, self.clock())
        await self.db.commit()
        return to_session_log_view(session_log)

    async def cancel(self, session_log_id: UUID, username: str) -> SessionLogResponse:
        gate = await self._gate(username)
        session_log = await gate.session_log(session_log_id)
        log_state.cancel(session_log, self.clock())
        await self.db.commit()
        return to_session_log_view(session_log)

    async def list_logs(self, username: str, session_id: UUID | None = None) -> list[SessionLogResponse]:
        gate = await self._gate(username)
        return [to_session_log_view(log) for log in await gate.session_logs(session_id)]

    async def get(self, session_log_id: UUID, username: str) -> SessionLogResponse:
        gate = await self._gate(username)
        return to_session_log_view(await gate.session_log(session_log_id))

    async def update(
        self,
        session_log_id: UUID,
        update: SessionLogUpdate,
        username: str,
    ) -> SessionLogResponse:
        """Apply notes and/or a status change to an in-progress log."""
        gate = await self._gate(username)
        session_log = await gate.session_log(session_log_id)
        log_state.ensure_mutable(session_log, "update")

        if update.notes is not None:
            session_log.notes = update.notes
        if update.status is not None:
            log_state.transition(session_log, update.status, self.clock())

        await self.db.commit()
        return to_session_log_view(session_log)

    async def delete(self, session_log_id: UUID, username: str) -> None:
        """Delete an in-progress log together with its execution logs."""
        gate = await self._gate(username)
        session_log = await gate.session_log(session_log_id)
        log_state.ensure_mutable(session_log, "delete")

        await self.db.delete(session_log)
        await self.db.commit()
        logger.info("Session log deleted", extra={"session_log_id": str(session_log_id)})
