"""
Placement rules for sessions inside a plan.

A plan holds at most 30 sessions; each has an order in 1..30 and both order and
name (ignoring case) are unique within the plan.
"""
from collections.abc import Sequence

from app.errors import ConflictError, InvalidOperationError
from app.models import TrainingSession

MAX_SESSIONS_PER_PLAN = 30


def ensure_order_in_range(order_id: int) -> None:
    if not 1 <= order_id <= MAX_SESSIONS_PER_PLAN:
        raise InvalidOperationError(f"Order must be between 1 and {MAX_SESSIONS_PER_PLAN}")


def next_order(siblings: Sequence[TrainingSession]) -> int:
    return max((s.order_id for s in siblings), default=0) + 1


def ensure_placement(siblings: Sequence[TrainingSession], name: str, order_id: int) -> None:
    """Check that one more session (``name`` at ``order_id``) fits next to ``siblings``."""
    if len(siblings) >= MAX_SESSIONS_PER_PLAN:
        raise InvalidOperationError(f"Maximum of {MAX_SESSIONS_PER_PLAN} sessions per plan reached")
    ensure_order_in_range(order_id)

    if any(s.name.lower() == name.lower() for s in siblings):
        raise ConflictError("Session with this name already exists in this plan")
    if any(s.order_id == order_id for s in siblings):
        raise ConflictError(f"Order {order_id} is already used in this plan")


def ensure_session_set(sessions: Sequence[TrainingSession]) -> None:
    """Check a complete set of sessions about to become the sessions of one plan."""
    placed: list[TrainingSession] = []
    for session in sessions:
        if any(s.id == session.id for s in placed):
            continue
        ensure_placement(placed, session.name, session.order_id)
        placed.append(session)
