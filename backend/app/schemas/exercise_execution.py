from uuid import UUID

from app.schemas.base import CamelModel


class ExerciseExecutionCreate(CamelModel):
    session_id: UUID
    exercise_id: UUID
    planned_sets: int
    planned_reps: int
    planned_weight: int
    order_id: int | None = None


class ExerciseExecutionUpdate(CamelModel):
    planned_sets: int | None = None
    planned_reps: int | None = None
    planned_weight: int | None = None
    order_id: int | None = None
    exercise_id: UUID | None = None


class ExerciseExecutionResponse(CamelModel):
    id: UUID
    planned_sets: int
    planned_reps: int
    planned_weight: int
    order_id: int
    session_id: UUID
    session_name: str
    exercise_id: UUID
    exercise_name: str
