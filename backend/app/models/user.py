"""User domain SQLAlchemy model."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    user_type = Column(String(20), nullable=False)  # student/coach/admin
    name = Column(String(100), nullable=False)
    full_name = Column(String(150))
    phone = Column(String(20), unique=True, nullable=False)
    email = Column(String(150))
    student_code = Column(String(20))  # PLYG123 style student id
    status = Column(String(20), default="active")  # active/inactive
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    @property
    def display_name(self) -> str:
        return self.name or self.full_name or ""
