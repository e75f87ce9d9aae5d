from uuid import UUID

from app.schemas.base import CamelModel
from app.schemas.enums import ExerciseCategory


class ExecutionLogUpdate(CamelModel):
    # Absent or null fields leave the stored value untouched. Negative values
    # are rejected by the service so the error carries a readable message.
    actual_sets: int | None = None
    actual_reps: int | None = None
    actual_weight: int | None = None
    completed: bool | None = None
    notes: str | None = None


class ExecutionLogResponse(CamelModel):
    id: UUID
    exercise_execution_id: int
    planned_sets: int
    planned_reps: int
    planned_weight: int
    exercise_id: UUID | None = None
    exercise_name: str
    exercise_category: ExerciseCategory
    exercise_muscle_group: list[str] = []
    exercise_description: str | None = None
    actual_sets: int
    actual_reps: int
    actual_weight: int
    completed: bool
    notes: str | None = None
    session_log_id: UUID
