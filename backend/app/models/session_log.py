import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.database import Base
from app.schemas.enums import LogStatus


class SessionLog(Base):
    """Historical record of one attempt at a session, owned by one user.

    Session and plan fields are copied by value when the log is started, so
    later catalog edits never show up here. ``original_session_id`` is a plain
    value, not a foreign key: the session may be deleted afterwards.
    """
    __tablename__ = "session_logs"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    original_session_id: Mapped[uuid.UUID] = mapped_column(index=True, nullable=False)

    # Snapshot
    session_name: Mapped[str] = mapped_column(String(255), nullable=False)
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)
    plan_description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Life cycle
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=LogStatus.IN_PROGRESS.value)

    notes: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Relationships
    owner = relationship("User", back_populates="session_logs")
    execution_logs = relationship(
        "ExecutionLog",
        back_populates="session_log",
        cascade="all, delete-orphan",
        order_by="ExecutionLog.exercise_execution_id",
        lazy="selectin",
    )

    @validates("owner_id")
    def _validate_owner_id(self, key, value):
        if self.owner_id is not None and value != self.owner_id:
            raise ValueError("The owner of a session log cannot be changed")
        return value
