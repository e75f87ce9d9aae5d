import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Plan(Base):
    __tablename__ = "plans"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Deleting a plan orphans its sessions (plan_id -> NULL), it never deletes them
    sessions = relationship(
        "TrainingSession",
        back_populates="plan",
        order_by="TrainingSession.order_id",
        lazy="selectin",
    )
