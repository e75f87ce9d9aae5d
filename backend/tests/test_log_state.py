"""Tests for the session log state machine."""
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.errors import InvalidOperationError
from app.models import SessionLog
from app.schemas.enums import LogStatus
from app.services import log_state

NOW = datetime(2026, 3, 1, 18, 30, tzinfo=timezone.utc)


def make_log(status: LogStatus = LogStatus.IN_PROGRESS, completed_at: datetime | None = None) -> SessionLog:
    return SessionLog(
        id=uuid.uuid4(),
        owner_id=uuid.uuid4(),
        original_session_id=uuid.uuid4(),
        session_name="Day A",
        plan_name="Strength",
        plan_description="",
        started_at=NOW - timedelta(hours=1),
        completed_at=completed_at,
        status=status.value,
    )


class TestComplete:
    def test_in_progress_becomes_completed(self):
        log = make_log()
        log_state.complete(log, NOW)
        assert log.status == LogStatus.COMPLETED.value
        assert log.completed_at == NOW

    def test_completing_completed_log_fails(self):
        log = make_log(LogStatus.COMPLETED, completed_at=NOW)
        with pytest.raises(InvalidOperationError, match="cannot update a completed training"):
            log_state.complete(log, NOW + timedelta(minutes=5))
        assert log.completed_at == NOW

    def test_completing_cancelled_log_fails(self):
        log = make_log(LogStatus.CANCELLED, completed_at=NOW)
        with pytest.raises(InvalidOperationError, match="cancelled"):
            log_state.complete(log, NOW)
        assert log.status == LogStatus.CANCELLED.value


class TestCancel:
    def test_in_progress_becomes_cancelled(self):
        log = make_log()
        log_state.cancel(log, NOW)
        assert log.status == LogStatus.CANCELLED.value
        assert log.completed_at == NOW

    @pytest.mark.parametrize("status", [LogStatus.COMPLETED, LogStatus.CANCELLED])
    def test_cancel_requires_in_progress(self, status: LogStatus):
        log = make_log(status, completed_at=NOW)
        with pytest.raises(InvalidOperationError, match="can only cancel a training that is in progress"):
            log_state.cancel(log, NOW + timedelta(minutes=1))
        assert log.status == status.value
        assert log.completed_at == NOW


class TestTransition:
    def test_same_status_is_noop(self):
        log = make_log()
        log_state.transition(log, LogStatus.IN_PROGRESS, NOW)
        assert log.status == LogStatus.IN_PROGRESS.value
        assert log.completed_at is None

    def test_existing_completed_at_is_kept(self):
        earlier = NOW - timedelta(minutes=10)
        log = make_log(completed_at=earlier)
        log_state.transition(log, LogStatus.COMPLETED, NOW)
        assert log.completed_at == earlier

    def test_terminal_to_in_progress_fails(self):
        log = make_log(LogStatus.COMPLETED, completed_at=NOW)
        with pytest.raises(InvalidOperationError):
            log_state.transition(log, LogStatus.IN_PROGRESS, NOW)


class TestEnsureMutable:
    def test_in_progress_is_mutable(self):
        log_state.ensure_mutable(make_log())

    def test_delete_message_names_status(self):
        log = make_log(LogStatus.CANCELLED, completed_at=NOW)
        with pytest.raises(InvalidOperationError, match="cannot delete a cancelled training"):
            log_state.ensure_mutable(log, "delete")

    def test_is_terminal(self):
        assert log_state.is_terminal(make_log(LogStatus.COMPLETED)) is True
        assert log_state.is_terminal(make_log()) is False
