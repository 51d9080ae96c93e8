"""Student enrollment (session quota) model."""

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class UserEnrollment(Base):
    __tablename__ = "user_enrollment"

    enrollment_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    batch_id = Column(Integer, ForeignKey("batch.batch_id"), nullable=False)
    package_type = Column(String(50))
    sessions_total = Column(Integer, nullable=False, default=0)
    sessions_attended = Column(Integer, nullable=False, default=0)
    enrollment_status = Column(String(20), default="active")
    # active/paused/completed/cancelled
    start_date = Column(Date)
    end_date = Column(Date)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User")
    batch = relationship("Batch", back_populates="enrollments")
    attendance_records = relationship(
        "AttendanceRecord",
        back_populates="enrollment",
        order_by="AttendanceRecord.record_id",
    )

    __table_args__ = (
        Index("idx_enrollment_batch_status", "batch_id", "enrollment_status"),
        CheckConstraint("sessions_total >= 0", name="ck_enrollment_sessions_total"),
        CheckConstraint("sessions_attended >= 0", name="ck_enrollment_sessions_attended"),
    )
