from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Batch(Base):
    __tablename__ = "batch"

    batch_id = Column(Integer, primary_key=True, autoincrement=True)
    sport_id = Column(Integer, ForeignKey("sports_program.sport_id"), nullable=False)
    location_id = Column(Integer, ForeignKey("location.location_id"), nullable=False)
    batch_name = Column(String(100), nullable=False)
    coach_name = Column(String(100))  # legacy free-text coach, predates coach_assignment
    schedule = Column(JSON, default=list)  # [{"day": "Monday", "start_time": "18:00", "end_time": "19:30"}]
    max_capacity = Column(Integer, default=0)
    current_enrollments = Column(Integer, default=0)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    sport = relationship("SportsProgram")
    location = relationship("Location")
    enrollments = relationship("UserEnrollment", back_populates="batch")
