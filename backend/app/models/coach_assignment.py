"""Coach to batch assignment model. Rows are never deleted; removal clears is_active."""

from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class CoachAssignment(Base):
    __tablename__ = "coach_assignment"

    assignment_id = Column(Integer, primary_key=True, autoincrement=True)
    coach_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    batch_id = Column(Integer, ForeignKey("batch.batch_id"), nullable=False)
    assigned_by = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    assigned_at = Column(DateTime, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    coach = relationship("User", foreign_keys=[coach_id])
    batch = relationship("Batch")
    assigner = relationship("User", foreign_keys=[assigned_by])

    __table_args__ = (
        Index("idx_coach_assignment_coach", "coach_id", "is_active"),
        Index("idx_coach_assignment_batch", "batch_id", "is_active"),
        # at most one active row per (coach, batch)
        Index(
            "uq_coach_assignment_active",
            "coach_id",
            "batch_id",
            unique=True,
            sqlite_where=text("is_active = 1"),
            postgresql_where=text("is_active"),
        ),
    )
