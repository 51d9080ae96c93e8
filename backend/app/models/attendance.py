"""Per-session attendance record model, one row per (enrollment, session date)."""

from sqlalchemy import Boolean, Column, Integer, Date, DateTime, String, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


class AttendanceRecord(Base):
    __tablename__ = "attendance_record"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(Integer, ForeignKey("user_enrollment.enrollment_id"), nullable=False)
    session_date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)  # present/absent/late/excused
    notes = Column(Text)
    marked_by = Column(String(100))
    # set only when marking present actually moved sessions_attended
    counted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    enrollment = relationship("UserEnrollment", back_populates="attendance_records")

    __table_args__ = (
        UniqueConstraint("enrollment_id", "session_date", name="uq_attendance_enrollment_date"),
        Index("idx_attendance_session_date", "session_date"),
    )
