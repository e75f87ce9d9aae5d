from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.enums import ExerciseCategory


class ExerciseBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: ExerciseCategory = ExerciseCategory.UNSPECIFIED
    muscle_groups: list[str] = Field(default_factory=list)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Exercise name must not be blank")
        return value


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(ExerciseBase):
    """Full replacement of an exercise."""


class ExerciseResponse(ExerciseBase):
    id: UUID
