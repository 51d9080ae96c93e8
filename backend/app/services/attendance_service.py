"""Attendance ledger service layer.

Single writer of per-session attendance outcomes and of
``UserEnrollment.sessions_attended``. Session dates are calendar ``date``
values everywhere: the request schemas parse them once, and both the daily
lookup and the history grouping key on the same value.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.errors import AttendanceConflict
from app.models.attendance import AttendanceRecord
from app.models.enrollment import UserEnrollment
from app.schemas.attendance import AttendanceRecordOut
from app.services.batch_service import get_active_enrollments
from app.utils.helpers import percentage, student_summary, utcnow

logger = logging.getLogger(__name__)

PRESENT = "present"
ATTENDANCE_STATUSES = ("present", "absent", "late", "excused")
MARK_ATTEMPTS = 2


def _find_record(db: Session, enrollment_id: int, session_date: date, lock: bool = False) -> Optional[AttendanceRecord]:
    q = db.query(AttendanceRecord).filter(
        AttendanceRecord.enrollment_id == enrollment_id,
        AttendanceRecord.session_date == session_date,
    )
    if lock:
        q = q.with_for_update()
    return q.first()


def present_delta(previous_status: Optional[str], new_status: str) -> int:
    """+1 on a transition into present, -1 on a transition out of it, else 0."""
    return int(new_status == PRESENT) - int(previous_status == PRESENT)


def _apply_attended_delta(db: Session, enrollment_id: int, delta: int) -> bool:
    """Shift sessions_attended by delta in one conditional UPDATE, bounded to [0, sessions_total]."""
    if delta == 0:
        return False

    q = db.query(UserEnrollment).filter(UserEnrollment.enrollment_id == enrollment_id)
    if delta > 0:
        q = q.filter(UserEnrollment.sessions_attended < UserEnrollment.sessions_total)
    else:
        q = q.filter(UserEnrollment.sessions_attended > 0)
    updated = q.update(
        {
            UserEnrollment.sessions_attended: UserEnrollment.sessions_attended + delta,
            UserEnrollment.updated_at: utcnow(),
        },
        synchronize_session=False,
    )
    if updated:
        logger.info("enrollment=%s sessions_attended %+d", enrollment_id, delta)
        return True

    exists = db.query(UserEnrollment.enrollment_id).filter(UserEnrollment.enrollment_id == enrollment_id).first()
    if exists is None:
        logger.warning("enrollment=%s not found; sessions_attended update skipped", enrollment_id)
    else:
        logger.warning("enrollment=%s sessions_attended at bound; %+d not applied", enrollment_id, delta)
    return False


def _correct_record(
    db: Session,
    record: AttendanceRecord,
    status: str,
    notes: Optional[str],
    marked_by: str,
) -> AttendanceRecord:
    previous_status = record.status
    record.status = status
    record.notes = notes
    record.marked_by = marked_by

    delta = present_delta(previous_status, status)
    if delta > 0:
        record.counted = _apply_attended_delta(db, record.enrollment_id, delta)
    elif delta < 0:
        # a present mark that hit the cap never incremented, so it must not decrement
        if record.counted:
            _apply_attended_delta(db, record.enrollment_id, delta)
        record.counted = False

    db.commit()
    db.refresh(record)
    logger.info(
        "attendance record=%s corrected %s -> %s by %s",
        record.record_id, previous_status, status, marked_by,
    )
    return record


def mark_attendance(
    db: Session,
    enrollment_id: int,
    session_date: date,
    status: str,
    marked_by: str,
    notes: Optional[str] = None,
) -> AttendanceRecord:
    """Record or correct the outcome for one (enrollment, session_date).

    An existing record is overwritten in place (created_at is preserved) and the
    attended counter follows the present/non-present transition. A concurrent
    insert for the same key trips ``uq_attendance_enrollment_date`` inside a
    savepoint and is retried as a correction, so the key never holds more than
    one row and the caller's other pending work in the session survives.
    """
    for attempt in range(1, MARK_ATTEMPTS + 1):
        existing = _find_record(db, enrollment_id, session_date, lock=True)
        if existing:
            return _correct_record(db, existing, status, notes, marked_by)

        record = AttendanceRecord(
            enrollment_id=enrollment_id,
            session_date=session_date,
            status=status,
            notes=notes,
            marked_by=marked_by,
            counted=False,
            created_at=utcnow(),
        )
        try:
            with db.begin_nested():
                db.add(record)
        except IntegrityError:
            logger.warning(
                "attendance for enrollment=%s on %s was inserted concurrently (attempt %d/%d)",
                enrollment_id, session_date, attempt, MARK_ATTEMPTS,
            )
            continue

        record.counted = _apply_attended_delta(db, enrollment_id, present_delta(None, status))
        db.commit()
        db.refresh(record)
        logger.info(
            "attendance record=%s created for enrollment=%s on %s: %s",
            record.record_id, enrollment_id, session_date, status,
        )
        return record

    logger.error("attendance for enrollment=%s on %s could not be written", enrollment_id, session_date)
    raise AttendanceConflict()


def _enrollment_brief(enrollment: UserEnrollment) -> dict:
    return {
        "enrollment_id": enrollment.enrollment_id,
        "user_id": enrollment.user_id,
        "batch_id": enrollment.batch_id,
        "sessions_total": enrollment.sessions_total,
        "sessions_attended": enrollment.sessions_attended,
        "enrollment_status": enrollment.enrollment_status,
    }


def get_batch_attendance(db: Session, batch_id: int, session_date: date) -> list[dict]:
    rows = []
    for enrollment in get_active_enrollments(db, batch_id):
        student = student_summary(enrollment.user)
        if student is None:
            continue
        rows.append({
            "enrollment": _enrollment_brief(enrollment),
            "student": student,
            "attendance": _find_record(db, enrollment.enrollment_id, session_date),
            "remaining_sessions": enrollment.sessions_total - enrollment.sessions_attended,
            "completion_percentage": percentage(enrollment.sessions_attended, enrollment.sessions_total),
        })
    return rows


def get_batch_attendance_history(
    db: Session,
    batch_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    limit: Optional[int] = None,
) -> list[dict]:
    if limit is None:
        limit = settings.HISTORY_DEFAULT_LIMIT
    end_date = end_date or date.today()
    start_date = start_date or end_date - timedelta(days=settings.HISTORY_DEFAULT_DAYS)

    enrollments = {e.enrollment_id: e for e in get_active_enrollments(db, batch_id)}
    if not enrollments:
        return []

    records = (
        db.query(AttendanceRecord)
        .filter(
            AttendanceRecord.enrollment_id.in_(list(enrollments)),
            AttendanceRecord.session_date >= start_date,
            AttendanceRecord.session_date <= end_date,
        )
        .order_by(AttendanceRecord.session_date.desc(), AttendanceRecord.record_id.asc())
        .all()
    )

    sessions: dict[date, dict] = {}
    for record in records:
        enrollment = enrollments[record.enrollment_id]
        student = student_summary(enrollment.user)
        if student is None:
            continue
        session = sessions.setdefault(record.session_date, {
            "session_date": record.session_date,
            "attendance_records": [],
            "summary": {status: 0 for status in (*ATTENDANCE_STATUSES, "total")},
        })
        entry = AttendanceRecordOut.model_validate(record).model_dump()
        entry["student"] = student
        entry["enrollment"] = _enrollment_brief(enrollment)
        session["attendance_records"].append(entry)
        session["summary"][record.status] += 1
        session["summary"]["total"] += 1

    ordered = sorted(sessions.values(), key=lambda s: s["session_date"], reverse=True)
    return ordered[:limit]
