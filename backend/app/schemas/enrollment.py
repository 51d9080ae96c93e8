"""Pydantic schemas for enrollments, progress reports and session adjustments."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date, datetime

from app.schemas.attendance import AttendanceRecordOut
from app.schemas.batch import BatchOut, SportOut
from app.schemas.user import StudentSummary


class EnrollmentOut(BaseModel):
    enrollment_id: int
    user_id: int
    batch_id: int
    package_type: Optional[str] = None
    sessions_total: int
    sessions_attended: int
    enrollment_status: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class EnrolledStudentOut(EnrollmentOut):
    student: StudentSummary


class ManagedEnrollmentOut(EnrollmentOut):
    student: StudentSummary
    batch_name: Optional[str] = None
    sport: Optional[SportOut] = None


class ProgressOut(BaseModel):
    sessions_total: int
    sessions_attended: int
    remaining_sessions: int
    completion_percentage: int
    is_completed: bool


class AttendanceStatsOut(BaseModel):
    total_marked: int
    present_count: int
    absent_count: int
    late_count: int
    excused_count: int
    attendance_rate: int


class StudentProgressOut(BaseModel):
    enrollment: EnrollmentOut
    student: Optional[StudentSummary] = None
    batch: Optional[BatchOut] = None
    progress: ProgressOut
    attendance: AttendanceStatsOut
    recent_attendance: List[AttendanceRecordOut]


class SessionAdjustRequest(BaseModel):
    sessions: int = Field(..., gt=0)
    reason: str = Field(..., min_length=1)
    notes: Optional[str] = None


class SessionAdjustResult(BaseModel):
    success: bool
    previous_total: int
    new_total: int
    sessions_added: Optional[int] = None
    sessions_removed: Optional[int] = None


class SessionAdjustmentOut(BaseModel):
    adjustment_id: int
    enrollment_id: int
    user_id: int
    student_code: str
    adjustment_type: str
    sessions_adjusted: int
    previous_sessions_total: int
    new_sessions_total: int
    reason: str
    adjusted_by: Optional[int] = None
    adjusted_by_name: str
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
