from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database import Base


class SessionAdjustment(Base):
    __tablename__ = "session_adjustment"

    adjustment_id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(Integer, ForeignKey("user_enrollment.enrollment_id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    student_code = Column(String(30), nullable=False)
    adjustment_type = Column(String(30), nullable=False)  # add_sessions/remove_sessions
    sessions_adjusted = Column(Integer, nullable=False)  # negative for removals
    previous_sessions_total = Column(Integer, nullable=False)
    new_sessions_total = Column(Integer, nullable=False)
    reason = Column(Text, nullable=False)
    adjusted_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    adjusted_by_name = Column(String(100), nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False)

    enrollment = relationship("UserEnrollment")

    __table_args__ = (
        Index("idx_session_adjustment_enrollment", "enrollment_id"),
        Index("idx_session_adjustment_created", "created_at"),
    )
