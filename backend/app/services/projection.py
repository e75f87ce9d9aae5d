"""Outward views of session and execution logs."""
from app.models import ExecutionLog, SessionLog
from app.schemas.enums import ExerciseCategory, LogStatus
from app.schemas.execution_log import ExecutionLogResponse
from app.schemas.session_log import SessionLogResponse


def to_execution_log_view(execution_log: ExecutionLog) -> ExecutionLogResponse:
    return ExecutionLogResponse(
        id=execution_log.id,
        exercise_execution_id=execution_log.exercise_execution_id,
        planned_sets=execution_log.planned_sets,
        planned_reps=execution_log.planned_reps,
        planned_weight=execution_log.planned_weight,
        exercise_id=execution_log.exercise_id,
        exercise_name=execution_log.exercise_name,
        exercise_category=ExerciseCategory(execution_log.exercise_category),
        exercise_muscle_group=list(execution_log.exercise_muscle_group),
        exercise_description=execution_log.exercise_description,
        actual_sets=execution_log.actual_sets,
        actual_reps=execution_log.actual_reps,
        actual_weight=execution_log.actual_weight,
        completed=execution_log.completed,
        notes=execution_log.notes,
        session_log_id=execution_log.session_log_id,
    )


def to_session_log_view(session_log: SessionLog) -> SessionLogResponse:
    """Flatten a session log with its execution logs; the count is derived from the list."""
    execution_logs = [to_execution_log_view(log) for log in session_log.execution_logs]
    return SessionLogResponse(
        id=session_log.id,
        session_name=session_log.session_name,
        plan_name=session_log.plan_name,
        plan_description=session_log.plan_description,
        started_at=session_log.started_at,
        completed_at=session_log.completed_at,
        status=LogStatus(session_log.status),
        notes=session_log.notes,
        original_session_id=session_log.original_session_id,
        execution_logs=execution_logs,
        execution_log_count=len(execution_logs),
    )
