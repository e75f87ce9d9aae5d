from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from app.schemas.base import CamelModel, as_utc
from app.schemas.enums import LogStatus
from app.schemas.execution_log import ExecutionLogResponse


class SessionLogUpdate(CamelModel):
    notes: str | None = None
    status: LogStatus | None = None


class SessionLogResponse(CamelModel):
    id: UUID
    session_name: str
    plan_name: str
    plan_description: str
    started_at: datetime
    completed_at: datetime | None = None
    status: LogStatus
    notes: str | None = None
    original_session_id: UUID
    execution_logs: list[ExecutionLogResponse]
    execution_log_count: int

    @field_validator("started_at", "completed_at")
    @classmethod
    def _normalize_to_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
