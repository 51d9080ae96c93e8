"""SQLAlchemy model package."""

from app.models.user import User
from app.models.catalog import SportsProgram, Location
from app.models.batch import Batch
from app.models.enrollment import UserEnrollment
from app.models.coach_assignment import CoachAssignment
from app.models.attendance import AttendanceRecord
from app.models.session_adjustment import SessionAdjustment

__all__ = [
    "User",
    "SportsProgram", "Location",
    "Batch",
    "UserEnrollment",
    "CoachAssignment",
    "AttendanceRecord",
    "SessionAdjustment",
]
