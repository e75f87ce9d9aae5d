"""
Ownership gate - the only way to fetch a session or execution log.

The owner predicate is part of every query, so foreign rows never leave the
database. A missing record and a record owned by someone else produce the same
AccessDeniedError.
"""
import logging
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from app.errors import AccessDeniedError
from app.models import ExecutionLog, SessionLog, User

logger = logging.getLogger(__name__)

SESSION_LOG_DENIED = "Session log not found or access denied"
EXECUTION_LOG_DENIED = "Execution log not found or access denied"


class OwnershipGate:
    """Scopes log queries to the logs of one user."""

    def __init__(self, db: AsyncSession, owner: User):
        self.db = db
        self.owner = owner

    def session_logs_query(self) -> Select:
        return select(SessionLog).where(SessionLog.owner_id == self.owner.id)

    def execution_logs_query(self) -> Select:
        return (
            select(ExecutionLog)
            .join(ExecutionLog.session_log)
            .options(contains_eager(ExecutionLog.session_log))
            .where(SessionLog.owner_id == self.owner.id)
        )

    async def session_log(self, session_log_id: UUID) -> SessionLog:
        result = await self.db.execute(
            self.session_logs_query().where(SessionLog.id == session_log_id)
        )
        session_log = result.scalar_one_or_none()
        if session_log is None:
            self._log_denied("session_log", session_log_id)
            raise AccessDeniedError(SESSION_LOG_DENIED)
        return session_log

    async def execution_log(self, execution_log_id: UUID) -> ExecutionLog:
        result = await self.db.execute(
            self.execution_logs_query().where(ExecutionLog.id == execution_log_id)
        )
        execution_log = result.unique().scalar_one_or_none()
        if execution_log is None:
            self._log_denied("execution_log", execution_log_id)
            raise AccessDeniedError(EXECUTION_LOG_DENIED)
        return execution_log

    async def session_logs(self, original_session_id: UUID | None = None) -> list[SessionLog]:
        query = self.session_logs_query()
        if original_session_id is not None:
            query = query.where(SessionLog.original_session_id == original_session_id)
        result = await self.db.execute(query.order_by(SessionLog.started_at.desc()))
        return list(result.scalars().all())

    async def execution_logs(self, session_log_id: UUID | None = None) -> list[ExecutionLog]:
        """Execution logs of the owner, optionally of one session log.

        When a session log is named it must itself belong to the owner.
        """
        query = self.execution_logs_query()
        if session_log_id is not None:
            await self.session_log(session_log_id)
            query = query.where(ExecutionLog.session_log_id == session_log_id)
        result = await self.db.execute(
            query.order_by(SessionLog.started_at.desc(), ExecutionLog.exercise_execution_id.asc())
        )
        return list(result.unique().scalars().all())

    def _log_denied(self, kind: str, record_id: UUID) -> None:
        logger.warning(
            "Log access denied",
            extra={"kind": kind, "record_id": str(record_id), "user_id": str(self.owner.id)},
        )


async def count_session_logs(
    db: AsyncSession,
    owner: User | None,
    session_ids: list[UUID],
) -> dict[UUID, int]:
    """Per-session number of logs ``owner`` started; zero for everything when anonymous."""
    counts = {session_id: 0 for session_id in session_ids}
    if owner is None or not session_ids:
        return counts

    result = await db.execute(
        select(SessionLog.original_session_id, func.count(SessionLog.id))
        .where(
            SessionLog.owner_id == owner.id,
            SessionLog.original_session_id.in_(session_ids),
        )
        .group_by(SessionLog.original_session_id)
    )
    for session_id, count in result.all():
        counts[session_id] = count
    return counts
