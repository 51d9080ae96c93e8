"""Attendance request/response schemas."""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

from app.schemas.user import StudentSummary

AttendanceStatus = Literal["present", "absent", "late", "excused"]


class AttendanceMarkRequest(BaseModel):
    enrollment_id: int
    session_date: date
    status: AttendanceStatus
    notes: Optional[str] = None


class AttendanceMarkResult(BaseModel):
    attendance_record_id: int


class AttendanceRecordOut(BaseModel):
    record_id: int
    enrollment_id: int
    session_date: date
    status: str
    notes: Optional[str] = None
    marked_by: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class EnrollmentBrief(BaseModel):
    enrollment_id: int
    user_id: int
    batch_id: int
    sessions_total: int
    sessions_attended: int
    enrollment_status: str

    model_config = {"from_attributes": True}


class StudentAttendanceOut(BaseModel):
    enrollment: EnrollmentBrief
    student: StudentSummary
    attendance: Optional[AttendanceRecordOut] = None
    remaining_sessions: int
    completion_percentage: int


class AttendanceSummary(BaseModel):
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0
    total: int = 0


class HistoryRecordOut(AttendanceRecordOut):
    student: StudentSummary
    enrollment: EnrollmentBrief


class AttendanceSessionOut(BaseModel):
    session_date: date
    attendance_records: List[HistoryRecordOut]
    summary: AttendanceSummary
