"""Attendance ledger API router."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.user import User
from app.schemas.attendance import (
    AttendanceMarkRequest,
    AttendanceMarkResult,
    AttendanceSessionOut,
    StudentAttendanceOut,
)
from app.services import attendance_service, batch_service, progress_service
from app.utils.permissions import ADMIN, COACH, can_manage_batch_attendance

router = APIRouter(prefix="/api", tags=["attendance"])


def _ensure_batch_access(db: Session, user: User, batch_id: int) -> None:
    if not can_manage_batch_attendance(db, user, batch_id):
        raise HTTPException(status_code=403, detail="Coach is not assigned to this batch.")


@router.post("/attendance", response_model=AttendanceMarkResult)
def mark_attendance(
    data: AttendanceMarkRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN, COACH)),
):
    enrollment = progress_service.get_enrollment_or_raise(db, data.enrollment_id)
    _ensure_batch_access(db, current_user, enrollment.batch_id)
    record = attendance_service.mark_attendance(
        db,
        data.enrollment_id,
        data.session_date,
        data.status,
        marked_by=current_user.display_name,
        notes=data.notes,
    )
    return {"attendance_record_id": record.record_id}


@router.get("/batches/{batch_id}/attendance", response_model=List[StudentAttendanceOut])
def batch_attendance(
    batch_id: int,
    session_date: date = Query(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN, COACH)),
):
    batch_service.get_batch_or_raise(db, batch_id)
    _ensure_batch_access(db, current_user, batch_id)
    return attendance_service.get_batch_attendance(db, batch_id, session_date)


@router.get("/batches/{batch_id}/attendance/history", response_model=List[AttendanceSessionOut])
def batch_attendance_history(
    batch_id: int,
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(ADMIN, COACH)),
):
    batch_service.get_batch_or_raise(db, batch_id)
    _ensure_batch_access(db, current_user, batch_id)
    return attendance_service.get_batch_attendance_history(db, batch_id, start_date, end_date, limit)
