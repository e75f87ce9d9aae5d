import uuid

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.schemas.enums import ExerciseCategory


class Exercise(Base):
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ExerciseCategory.UNSPECIFIED.value
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    muscle_group_rows = relationship(
        "ExerciseMuscleGroup",
        cascade="all, delete-orphan",
        order_by="ExerciseMuscleGroup.id",
        lazy="selectin",
    )
    executions = relationship("ExerciseExecution", back_populates="exercise", cascade="all, delete-orphan")

    @property
    def muscle_groups(self) -> list[str]:
        return [row.muscle_group for row in self.muscle_group_rows]

    @muscle_groups.setter
    def muscle_groups(self, names: list[str]) -> None:
        self.muscle_group_rows = [ExerciseMuscleGroup(muscle_group=name) for name in names]


class ExerciseMuscleGroup(Base):
    __tablename__ = "exercise_muscle_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), index=True, nullable=False
    )
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False)
