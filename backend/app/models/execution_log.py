import uuid

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class ExecutionLog(Base):
    """Planned-vs-actual record for one prescription of a session log."""
    __tablename__ = "execution_logs"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    session_log_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("session_logs.id", ondelete="CASCADE"), index=True, nullable=False
    )

    # Snapshot of the planned exercise execution
    exercise_execution_id: Mapped[int] = mapped_column(Integer, nullable=False)  # planned order
    planned_sets: Mapped[int] = mapped_column(Integer, nullable=False)
    planned_reps: Mapped[int] = mapped_column(Integer, nullable=False)
    planned_weight: Mapped[int] = mapped_column(Integer, nullable=False)

    # Snapshot of the exercise
    exercise_id: Mapped[uuid.UUID | None] = mapped_column(nullable=True)
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    exercise_category: Mapped[str] = mapped_column(String(20), nullable=False)
    exercise_description: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # What actually happened
    actual_sets: Mapped[int] = mapped_column(Integer, nullable=False)
    actual_reps: Mapped[int] = mapped_column(Integer, nullable=False)
    actual_weight: Mapped[int] = mapped_column(Integer, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    session_log = relationship("SessionLog", back_populates="execution_logs")
    muscle_group_rows = relationship(
        "ExecutionLogMuscleGroup",
        cascade="all, delete-orphan",
        order_by="ExecutionLogMuscleGroup.id",
        lazy="selectin",
    )

    @property
    def exercise_muscle_group(self) -> list[str]:
        return [row.muscle_group for row in self.muscle_group_rows]

    @exercise_muscle_group.setter
    def exercise_muscle_group(self, names: list[str]) -> None:
        self.muscle_group_rows = [ExecutionLogMuscleGroup(muscle_group=name) for name in names]


class ExecutionLogMuscleGroup(Base):
    __tablename__ = "execution_log_muscle_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    execution_log_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("execution_logs.id", ondelete="CASCADE"), index=True, nullable=False
    )
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False)
