"""Enrollment progress and session adjustment API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, require_roles
from app.models.user import User
from app.schemas.enrollment import (
    ManagedEnrollmentOut,
    SessionAdjustmentOut,
    SessionAdjustRequest,
    SessionAdjustResult,
    StudentProgressOut,
)
from app.services import adjustment_service, progress_service
from app.utils.permissions import can_view_enrollment

router = APIRouter(prefix="/api", tags=["enrollments"])


@router.get("/enrollments/{enrollment_id}/progress", response_model=StudentProgressOut)
def student_progress(
    enrollment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    enrollment = progress_service.get_enrollment_or_raise(db, enrollment_id)
    if not can_view_enrollment(db, current_user, enrollment):
        raise HTTPException(status_code=403, detail="Not allowed to view this enrollment.")
    return progress_service.get_student_progress(db, enrollment_id)


@router.post("/enrollments/{enrollment_id}/sessions/add", response_model=SessionAdjustResult)
def add_sessions(
    enrollment_id: int,
    data: SessionAdjustRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return adjustment_service.add_sessions(
        db, enrollment_id, data.sessions, data.reason,
        adjusted_by=current_user.user_id, notes=data.notes,
    )


@router.post("/enrollments/{enrollment_id}/sessions/remove", response_model=SessionAdjustResult)
def remove_sessions(
    enrollment_id: int,
    data: SessionAdjustRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return adjustment_service.remove_sessions(
        db, enrollment_id, data.sessions, data.reason,
        adjusted_by=current_user.user_id, notes=data.notes,
    )


@router.get("/enrollments/{enrollment_id}/adjustments", response_model=List[SessionAdjustmentOut])
def enrollment_adjustments(
    enrollment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return adjustment_service.list_adjustments(db, enrollment_id)


@router.get("/session-adjustments", response_model=List[SessionAdjustmentOut])
def recent_adjustments(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return adjustment_service.list_recent_adjustments(db, limit)


@router.get("/session-adjustments/students/{student_code}", response_model=List[SessionAdjustmentOut])
def student_adjustments(
    student_code: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return adjustment_service.list_adjustments_by_student(db, student_code)


@router.get("/session-management/enrollments", response_model=List[ManagedEnrollmentOut])
def session_management_enrollments(
    q: Optional[str] = Query(None, description="Match student name, code or phone"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    if q is None:
        return adjustment_service.get_enrollments_for_session_management(db)
    return adjustment_service.search_enrollments(db, q)
