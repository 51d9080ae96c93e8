"""Progress reporting service layer. Read-only aggregation over enrollments and the attendance ledger."""

from sqlalchemy.orm import Session

from app.config import settings
from app.errors import EnrollmentNotFound
from app.models.attendance import AttendanceRecord
from app.models.enrollment import UserEnrollment
from app.utils.helpers import percentage, student_summary


def get_enrollment_or_raise(db: Session, enrollment_id: int) -> UserEnrollment:
    enrollment = db.query(UserEnrollment).filter(UserEnrollment.enrollment_id == enrollment_id).first()
    if not enrollment:
        raise EnrollmentNotFound()
    return enrollment


def get_student_progress(db: Session, enrollment_id: int) -> dict:
    enrollment = get_enrollment_or_raise(db, enrollment_id)

    # insertion order; recent_attendance is the tail of this list, not the latest session dates
    records = (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.enrollment_id == enrollment_id)
        .order_by(AttendanceRecord.record_id.asc())
        .all()
    )

    counts = {"present": 0, "absent": 0, "late": 0, "excused": 0}
    for record in records:
        if record.status in counts:
            counts[record.status] += 1
    total_marked = len(records)

    sessions_total = enrollment.sessions_total
    sessions_attended = enrollment.sessions_attended
    recent_limit = settings.RECENT_ATTENDANCE_LIMIT

    return {
        "enrollment": enrollment,
        "student": student_summary(enrollment.user),
        "batch": enrollment.batch,
        "progress": {
            "sessions_total": sessions_total,
            "sessions_attended": sessions_attended,
            "remaining_sessions": sessions_total - sessions_attended,
            "completion_percentage": percentage(sessions_attended, sessions_total),
            "is_completed": sessions_attended >= sessions_total,
        },
        "attendance": {
            "total_marked": total_marked,
            "present_count": counts["present"],
            "absent_count": counts["absent"],
            "late_count": counts["late"],
            "excused_count": counts["excused"],
            "attendance_rate": percentage(counts["present"], total_marked),
        },
        "recent_attendance": records[-recent_limit:] if recent_limit > 0 else [],
    }
