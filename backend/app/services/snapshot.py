"""
Snapshot builder - turns a planned session into a fresh session log.

Every field is copied by value. The resulting SessionLog and ExecutionLogs hold
no references into live catalog rows, so editing or deleting the session, its
plan, its executions or their exercises afterwards never changes the log.
"""
from collections.abc import Sequence
from datetime import datetime

from app.errors import InvalidOperationError
from app.models import ExecutionLog, ExerciseExecution, SessionLog, TrainingSession, User
from app.schemas.enums import LogStatus

NO_PLAN_NAME = "No Plan"
EMPTY_SESSION_MESSAGE = "Cannot start training: session must contain at least one exercise"


def snapshot_execution(execution: ExerciseExecution) -> ExecutionLog:
    """Copy one planned execution (and its exercise) into an ExecutionLog.

    Actual values start out equal to the planned ones until the user edits them.
    """
    exercise = execution.exercise
    return ExecutionLog(
        exercise_execution_id=execution.order_id,
        planned_sets=execution.planned_sets,
        planned_reps=execution.planned_reps,
        planned_weight=execution.planned_weight,
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        exercise_category=exercise.category,
        exercise_muscle_group=list(exercise.muscle_groups),
        exercise_description=exercise.description,
        actual_sets=execution.planned_sets,
        actual_reps=execution.planned_reps,
        actual_weight=execution.planned_weight,
        completed=False,
        notes=None,
    )


def build_session_log(
    session: TrainingSession,
    executions: Sequence[ExerciseExecution],
    owner: User,
    started_at: datetime,
) -> SessionLog:
    """Fabricate an in-progress SessionLog with one ExecutionLog per execution.

    ``executions`` must already be in ascending planned order.

    Raises:
        InvalidOperationError: If the session has no planned executions
    """
    if not executions:
        raise InvalidOperationError(EMPTY_SESSION_MESSAGE)

    plan = session.plan
    return SessionLog(
        owner_id=owner.id,
        original_session_id=session.id,
        session_name=session.name,
        plan_name=plan.name if plan is not None else NO_PLAN_NAME,
        plan_description=(plan.description or "") if plan is not None else "",
        started_at=started_at,
        completed_at=None,
        status=LogStatus.IN_PROGRESS.value,
        notes=None,
        execution_logs=[snapshot_execution(execution) for execution in executions],
    )
