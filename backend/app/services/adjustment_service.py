"""Session adjustment service layer.

Admins grow or shrink an enrollment's session quota; every change leaves an
audit row. Removals never take ``sessions_total`` below the sessions already
attended.
"""

import logging
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.config import settings
from app.errors import InvalidAdjustment
from app.models.enrollment import UserEnrollment
from app.models.session_adjustment import SessionAdjustment
from app.models.user import User
from app.schemas.enrollment import EnrollmentOut
from app.services.progress_service import get_enrollment_or_raise
from app.utils.helpers import student_summary, utcnow

logger = logging.getLogger(__name__)

ADD_SESSIONS = "add_sessions"
REMOVE_SESSIONS = "remove_sessions"


def _adjuster_name(db: Session, adjusted_by: Optional[int]) -> str:
    if adjusted_by is None:
        return "System Admin"
    admin = db.query(User).filter(User.user_id == adjusted_by).first()
    if not admin:
        return "System Admin"
    return admin.full_name or admin.name or "Admin"


def _record_adjustment(
    db: Session,
    enrollment_id: int,
    adjustment_type: str,
    requested: int,
    reason: str,
    adjusted_by: Optional[int],
    notes: Optional[str],
) -> tuple[int, int]:
    if requested <= 0:
        raise InvalidAdjustment()
    enrollment = get_enrollment_or_raise(db, enrollment_id)
    student = enrollment.user

    previous_total = enrollment.sessions_total
    if adjustment_type == ADD_SESSIONS:
        new_total = previous_total + requested
    else:
        floor = min(previous_total, enrollment.sessions_attended)
        new_total = max(floor, previous_total - requested, 0)

    now = utcnow()
    enrollment.sessions_total = new_total
    enrollment.updated_at = now
    db.add(SessionAdjustment(
        enrollment_id=enrollment_id,
        user_id=enrollment.user_id,
        student_code=(student.student_code or student.phone) if student else "Unknown",
        adjustment_type=adjustment_type,
        sessions_adjusted=new_total - previous_total,
        previous_sessions_total=previous_total,
        new_sessions_total=new_total,
        reason=reason,
        adjusted_by=adjusted_by,
        adjusted_by_name=_adjuster_name(db, adjusted_by),
        notes=notes,
        created_at=now,
    ))
    db.commit()
    logger.info(
        "enrollment=%s sessions_total %s -> %s (%s, by=%s)",
        enrollment_id, previous_total, new_total, adjustment_type, adjusted_by,
    )
    return previous_total, new_total


def add_sessions(
    db: Session,
    enrollment_id: int,
    sessions_to_add: int,
    reason: str,
    adjusted_by: Optional[int] = None,
    notes: Optional[str] = None,
) -> dict:
    previous_total, new_total = _record_adjustment(
        db, enrollment_id, ADD_SESSIONS, sessions_to_add, reason, adjusted_by, notes,
    )
    return {
        "success": True,
        "previous_total": previous_total,
        "new_total": new_total,
        "sessions_added": new_total - previous_total,
    }


def remove_sessions(
    db: Session,
    enrollment_id: int,
    sessions_to_remove: int,
    reason: str,
    adjusted_by: Optional[int] = None,
    notes: Optional[str] = None,
) -> dict:
    previous_total, new_total = _record_adjustment(
        db, enrollment_id, REMOVE_SESSIONS, sessions_to_remove, reason, adjusted_by, notes,
    )
    return {
        "success": True,
        "previous_total": previous_total,
        "new_total": new_total,
        "sessions_removed": previous_total - new_total,
    }


def list_adjustments(db: Session, enrollment_id: int) -> list[SessionAdjustment]:
    get_enrollment_or_raise(db, enrollment_id)
    return (
        db.query(SessionAdjustment)
        .filter(SessionAdjustment.enrollment_id == enrollment_id)
        .order_by(SessionAdjustment.adjustment_id.desc())
        .all()
    )


def list_recent_adjustments(db: Session, limit: Optional[int] = None) -> list[SessionAdjustment]:
    if limit is None:
        limit = settings.ADJUSTMENT_LIST_LIMIT
    return (
        db.query(SessionAdjustment)
        .order_by(SessionAdjustment.adjustment_id.desc())
        .limit(limit)
        .all()
    )


def _managed_enrollment(enrollment: UserEnrollment) -> dict:
    batch = enrollment.batch
    sport = batch.sport if batch else None
    return {
        **EnrollmentOut.model_validate(enrollment).model_dump(),
        "student": student_summary(enrollment.user),
        "batch_name": batch.batch_name if batch else None,
        "sport": {"sport_id": sport.sport_id, "name": sport.name} if sport else None,
    }


def _active_enrollment_query(db: Session):
    return (
        db.query(UserEnrollment)
        .join(User, User.user_id == UserEnrollment.user_id)
        .filter(UserEnrollment.enrollment_status == "active")
        .order_by(UserEnrollment.enrollment_id.desc())
    )


def get_enrollments_for_session_management(db: Session) -> list[dict]:
    """Active enrollments with the student, batch and sport an admin picks from."""
    return [_managed_enrollment(e) for e in _active_enrollment_query(db).all()]


def search_enrollments(db: Session, term: str) -> list[dict]:
    """Active enrollments whose student name, code or phone contains ``term`` (case-insensitive)."""
    term = term.strip()
    if not term:
        return []
    pattern = f"%{term}%"
    enrollments = (
        _active_enrollment_query(db)
        .filter(or_(
            User.name.ilike(pattern),
            User.full_name.ilike(pattern),
            User.student_code.ilike(pattern),
            User.phone.ilike(pattern),
        ))
        .all()
    )
    return [_managed_enrollment(e) for e in enrollments]


def list_adjustments_by_student(db: Session, student_code: str) -> list[SessionAdjustment]:
    return (
        db.query(SessionAdjustment)
        .filter(SessionAdjustment.student_code == student_code)
        .order_by(SessionAdjustment.adjustment_id.desc())
        .all()
    )
