from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel


class PlanCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class PlanUpdate(PlanCreate):
    sessions: list[UUID] | None = Field(
        None, description="When given, replaces the plan's sessions with exactly these"
    )


class PlanSessionSummary(CamelModel):
    id: UUID
    name: str
    order_id: int


class PlanResponse(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    sessions: list[PlanSessionSummary] = []
