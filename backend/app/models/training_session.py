import uuid

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class TrainingSession(Base):
    """A planned workout inside a plan."""
    __tablename__ = "sessions"
    __table_args__ = (
        UniqueConstraint("plan_id", "name", name="uq_session_plan_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    plan_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("plans.id", ondelete="SET NULL"), index=True, nullable=True
    )
    order_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # 1-30 within the plan

    # Relationships
    plan = relationship("Plan", back_populates="sessions", lazy="selectin")
    exercise_executions = relationship(
        "ExerciseExecution",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ExerciseExecution.order_id",
        lazy="selectin",
    )
