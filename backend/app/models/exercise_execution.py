import uuid

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class ExerciseExecution(Base):
    """Planned prescription (sets x reps x weight) of one exercise in a session."""
    __tablename__ = "exercise_executions"
    __table_args__ = (
        UniqueConstraint("session_id", "exercise_id", name="uq_execution_session_exercise"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("sessions.id", ondelete="CASCADE"), index=True, nullable=False
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), index=True, nullable=False
    )

    planned_sets: Mapped[int] = mapped_column(Integer, nullable=False)
    planned_reps: Mapped[int] = mapped_column(Integer, nullable=False)
    planned_weight: Mapped[int] = mapped_column(Integer, nullable=False)
    order_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    session = relationship("TrainingSession", back_populates="exercise_executions", lazy="selectin")
    exercise = relationship("Exercise", back_populates="executions", lazy="selectin")
