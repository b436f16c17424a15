"""SQLAlchemy ORM model for the TimeRecord entity."""

from datetime import datetime

from sqlalchemy import DateTime, Double, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class TimeRecordModel(Base):
    """ORM model — maps to the 'time_records' table."""

    __tablename__ = "time_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration_in_seconds: Mapped[float] = mapped_column(Double, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("ix_time_records_user", "user_id"),
        Index("ix_time_records_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<TimeRecordModel(id={self.id}, "
            f"duration={self.duration_in_seconds}, user='{self.user_id}')>"
        )
