"""
Session log state machine.

    InProgress --complete--> Completed
    InProgress --cancel----> Cancelled

Completed and Cancelled are terminal: the log and its execution logs can no
longer be updated or deleted, and ``completed_at`` is frozen.
"""
import logging
from datetime import datetime

from app.errors import InvalidOperationError
from app.models import SessionLog
from app.schemas.enums import LogStatus

logger = logging.getLogger(__name__)

TERMINAL_STATUSES: frozenset[LogStatus] = frozenset({LogStatus.COMPLETED, LogStatus.CANCELLED})

ALLOWED_TRANSITIONS: dict[LogStatus, frozenset[LogStatus]] = {
    LogStatus.IN_PROGRESS: frozenset({LogStatus.IN_PROGRESS, LogStatus.COMPLETED, LogStatus.CANCELLED}),
    LogStatus.COMPLETED: frozenset(),
    LogStatus.CANCELLED: frozenset(),
}

CANCEL_NOT_IN_PROGRESS_MESSAGE = "can only cancel a training that is in progress"


def current_status(session_log: SessionLog) -> LogStatus:
    return LogStatus(session_log.status)


def is_terminal(session_log: SessionLog) -> bool:
    return current_status(session_log) in TERMINAL_STATUSES


def ensure_mutable(session_log: SessionLog, action: str = "update") -> None:
    """Reject ``action`` ("update" or "delete") on a log in a terminal status."""
    status = current_status(session_log)
    if status in TERMINAL_STATUSES:
        raise InvalidOperationError(f"cannot {action} a {status.label} training")


def transition(session_log: SessionLog, target: LogStatus, now: datetime) -> None:
    """Move ``session_log`` to ``target``, stamping ``completed_at`` on the first terminal move."""
    ensure_mutable(session_log)
    status = current_status(session_log)
    if target not in ALLOWED_TRANSITIONS[status]:
        raise InvalidOperationError(f"cannot move a training from {status.value} to {target.value}")

    if target == status:
        return

    session_log.status = target.value
    if target in TERMINAL_STATUSES and session_log.completed_at is None:
        session_log.completed_at = now

    logger.info(
        "Session log status changed",
        extra={
            "session_log_id": str(session_log.id),
            "from_status": status.value,
            "to_status": target.value,
        },
    )


def complete(session_log: SessionLog, now: datetime) -> None:
    transition(session_log, LogStatus.COMPLETED, now)


def cancel(session_log: SessionLog, now: datetime) -> None:
    if current_status(session_log) != LogStatus.IN_PROGRESS:
        raise InvalidOperationError(CANCEL_NOT_IN_PROGRESS_MESSAGE)
    transition(session_log, LogStatus.CANCELLED, now)
