from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.exercise_execution import ExerciseExecutionResponse


class TrainingSessionCreate(CamelModel):
    plan_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    order_id: int | None = None


class TrainingSessionUpdate(CamelModel):
    plan_id: UUID | None = None
    name: str = Field(..., min_length=1, max_length=255)
    order_id: int | None = None


class TrainingSessionResponse(CamelModel):
    id: UUID
    name: str
    plan_id: UUID | None = None
    order_id: int
    exercise_executions_count: int
    session_log_count: int = Field(0, description="Logs the caller started from this session")
    exercise_executions: list[ExerciseExecutionResponse] = []
