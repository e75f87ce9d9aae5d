"""Tests for the session and execution log services."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import AccessDeniedError, InvalidOperationError, NotFoundError
from app.models import ExecutionLog, SessionLog, User
from app.schemas.enums import LogStatus
from app.schemas.execution_log import ExecutionLogUpdate
from app.schemas.session_log import SessionLogUpdate
from app.services.execution_logs import ExecutionLogService
from app.services.ownership import EXECUTION_LOG_DENIED, SESSION_LOG_DENIED, count_session_logs
from app.services.session_logs import SessionLogService


class FixedClock:
    """Clock advancing one minute per reading."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 3, 1, 17, 0, tzinfo=timezone.utc))


@pytest.mark.asyncio
class TestSessionLogService:
    async def test_start_snapshots_session(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        view = await SessionLogService(db_session, clock).start(catalog["session"].id, "alice")

        assert view.status == LogStatus.IN_PROGRESS
        assert view.session_name == "Day A"
        assert view.plan_name == "Strength"
        assert view.completed_at is None
        assert view.execution_log_count == len(view.execution_logs) == 2
        assert [log.exercise_name for log in view.execution_logs] == ["Squat", "Bench Press"]

        persisted = await db_session.execute(
            select(func.count(ExecutionLog.id)).where(ExecutionLog.session_log_id == view.id)
        )
        assert persisted.scalar_one() == 2

    async def test_start_unknown_session(self, db_session: AsyncSession, alice: User, clock):
        with pytest.raises(NotFoundError, match="Session not found"):
            await SessionLogService(db_session, clock).start(uuid.uuid4(), "alice")

    async def test_start_unknown_user(self, db_session: AsyncSession, catalog: dict, clock):
        with pytest.raises(NotFoundError, match="User not found"):
            await SessionLogService(db_session, clock).start(catalog["session"].id, "ghost")

    async def test_start_empty_session_persists_nothing(
        self, db_session: AsyncSession, alice: User, catalog: dict, clock
    ):
        with pytest.raises(InvalidOperationError, match="at least one exercise"):
            await SessionLogService(db_session, clock).start(catalog["empty_session"].id, "alice")

        result = await db_session.execute(select(func.count(SessionLog.id)))
        assert result.scalar_one() == 0

    async def test_complete_stamps_completed_at(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        service = SessionLogService(db_session, clock)
        started = await service.start(catalog["session"].id, "alice")

        completed = await service.complete(started.id, "alice")

        assert completed.status == LogStatus.COMPLETED
        assert completed.completed_at == clock.now
        assert completed.completed_at > completed.started_at

    async def test_terminal_log_rejects_update_and_delete(
        self, db_session: AsyncSession, alice: User, catalog: dict, clock
    ):
        service = SessionLogService(db_session, clock)
        started = await service.start(catalog["session"].id, "alice")
        await service.cancel(started.id, "alice")

        with pytest.raises(InvalidOperationError, match="cannot update a cancelled training"):
            await service.update(started.id, SessionLogUpdate(notes="late"), "alice")
        with pytest.raises(InvalidOperationError, match="cannot delete a cancelled training"):
            await service.delete(started.id, "alice")

        view = await service.get(started.id, "alice")
        assert view.notes is None
        assert view.status == LogStatus.CANCELLED

    async def test_update_notes_only_keeps_status(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        service = SessionLogService(db_session, clock)
        started = await service.start(catalog["session"].id, "alice")

        view = await service.update(started.id, SessionLogUpdate(notes="felt strong"), "alice")

        assert view.notes == "felt strong"
        assert view.status == LogStatus.IN_PROGRESS

    async def test_update_with_status_completes(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        service = SessionLogService(db_session, clock)
        started = await service.start(catalog["session"].id, "alice")

        view = await service.update(
            started.id, SessionLogUpdate(notes="done", status=LogStatus.COMPLETED), "alice"
        )

        assert view.status == LogStatus.COMPLETED
        assert view.notes == "done"
        assert view.completed_at is not None

    async def test_delete_removes_children(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        service = SessionLogService(db_session, clock)
        started = await service.start(catalog["session"].id, "alice")

        await service.delete(started.id, "alice")

        result = await db_session.execute(select(func.count(ExecutionLog.id)))
        assert result.scalar_one() == 0
        with pytest.raises(AccessDeniedError):
            await service.get(started.id, "alice")

    async def test_list_is_newest_first_and_filtered(
        self, db_session: AsyncSession, alice: User, catalog: dict, clock
    ):
        service = SessionLogService(db_session, clock)
        first = await service.start(catalog["session"].id, "alice")
        second = await service.start(catalog["session"].id, "alice")

        logs = await service.list_logs("alice")
        assert [log.id for log in logs] == [second.id, first.id]

        assert await service.list_logs("alice", uuid.uuid4()) == []
        assert len(await service.list_logs("alice", catalog["session"].id)) == 2


@pytest.mark.asyncio
class TestOwnershipIsolation:
    async def test_foreign_and_missing_logs_look_the_same(
        self, db_session: AsyncSession, alice: User, bob: User, catalog: dict, clock
    ):
        service = SessionLogService(db_session, clock)
        log = await service.start(catalog["session"].id, "alice")

        with pytest.raises(AccessDeniedError) as foreign:
            await service.get(log.id, "bob")
        with pytest.raises(AccessDeniedError) as missing:
            await service.get(uuid.uuid4(), "bob")
        assert foreign.value.message == missing.value.message == SESSION_LOG_DENIED

        with pytest.raises(AccessDeniedError):
            await service.complete(log.id, "bob")
        assert await service.list_logs("bob") == []
        assert (await service.get(log.id, "alice")).status == LogStatus.IN_PROGRESS

    async def test_foreign_execution_log(self, db_session: AsyncSession, alice: User, bob: User, catalog: dict, clock):
        log = await SessionLogService(db_session, clock).start(catalog["session"].id, "alice")
        execution_log_id = log.execution_logs[0].id
        service = ExecutionLogService(db_session)

        with pytest.raises(AccessDeniedError, match=EXECUTION_LOG_DENIED):
            await service.update(execution_log_id, ExecutionLogUpdate(actual_sets=1), "bob")
        with pytest.raises(AccessDeniedError, match=SESSION_LOG_DENIED):
            await service.list_logs("bob", log.id)
        assert await service.list_logs("bob") == []

    async def test_session_log_counts_are_per_owner(
        self, db_session: AsyncSession, alice: User, bob: User, catalog: dict, clock
    ):
        service = SessionLogService(db_session, clock)
        await service.start(catalog["session"].id, "alice")
        await service.start(catalog["session"].id, "alice")
        await service.start(catalog["session"].id, "bob")
        session_id = catalog["session"].id

        assert await count_session_logs(db_session, alice, [session_id]) == {session_id: 2}
        assert await count_session_logs(db_session, bob, [session_id]) == {session_id: 1}
        assert await count_session_logs(db_session, None, [session_id]) == {session_id: 0}


@pytest.mark.asyncio
class TestExecutionLogService:
    async def _start(self, db_session: AsyncSession, catalog: dict, clock):
        return await SessionLogService(db_session, clock).start(catalog["session"].id, "alice")

    async def test_partial_update(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        log = await self._start(db_session, catalog, clock)
        target = log.execution_logs[0]

        view = await ExecutionLogService(db_session).update(
            target.id, ExecutionLogUpdate(actual_reps=4, completed=True), "alice"
        )

        assert view.actual_reps == 4
        assert view.completed is True
        assert view.actual_sets == target.actual_sets
        assert view.actual_weight == target.actual_weight
        assert view.notes is None

    async def test_negative_values_rejected(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        log = await self._start(db_session, catalog, clock)
        target = log.execution_logs[0]
        service = ExecutionLogService(db_session)

        with pytest.raises(InvalidOperationError, match="cannot be negative"):
            await service.update(
                target.id, ExecutionLogUpdate(actual_reps=6, actual_weight=-5), "alice"
            )

        view = await service.get(target.id, "alice")
        assert view.actual_reps == target.actual_reps
        assert view.actual_weight == target.actual_weight

    async def test_terminal_parent_blocks_changes(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        log = await self._start(db_session, catalog, clock)
        await SessionLogService(db_session, clock).complete(log.id, "alice")
        service = ExecutionLogService(db_session)
        target = log.execution_logs[0]

        with pytest.raises(InvalidOperationError, match="cannot update a completed training"):
            await service.update(target.id, ExecutionLogUpdate(notes="x"), "alice")
        with pytest.raises(InvalidOperationError, match="cannot delete a completed training"):
            await service.delete(target.id, "alice")

    async def test_delete_keeps_siblings(self, db_session: AsyncSession, alice: User, catalog: dict, clock):
        log = await self._start(db_session, catalog, clock)
        service = ExecutionLogService(db_session)

        await service.delete(log.execution_logs[0].id, "alice")

        remaining = await service.list_logs("alice", log.id)
        assert [e.id for e in remaining] == [log.execution_logs[1].id]
