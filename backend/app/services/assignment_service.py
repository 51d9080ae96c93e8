"""Coach assignment service layer.

Owns the coach to batch relation. An assignment is never hard-deleted; removing
it clears ``is_active`` so the audit trail survives, and a fresh assignment for
the same pair may be created afterwards. At most one active row exists per
(coach, batch): the service checks first, and the partial unique index
``uq_coach_assignment_active`` rejects a concurrent insert that slips past the
check.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import AssignmentNotFound, DuplicateAssignment, InvalidCoach
from app.models.batch import Batch
from app.models.coach_assignment import CoachAssignment
from app.models.user import User
from app.services.batch_service import batch_detail, get_active_enrollments, get_batch_or_raise
from app.utils.helpers import coach_summary, student_summary, utcnow
from app.utils.permissions import COACH

logger = logging.getLogger(__name__)


def _active_assignment(db: Session, coach_id: int, batch_id: int) -> Optional[CoachAssignment]:
    return (
        db.query(CoachAssignment)
        .filter(
            CoachAssignment.coach_id == coach_id,
            CoachAssignment.batch_id == batch_id,
            CoachAssignment.is_active == True,  # noqa: E712
        )
        .first()
    )


def assign_coach_to_batch(
    db: Session,
    coach_id: int,
    batch_id: int,
    assigned_by: int,
    notes: Optional[str] = None,
) -> CoachAssignment:
    coach = db.query(User).filter(User.user_id == coach_id).first()
    if not coach or coach.user_type != COACH:
        raise InvalidCoach()
    get_batch_or_raise(db, batch_id)

    if _active_assignment(db, coach_id, batch_id):
        raise DuplicateAssignment()

    now = utcnow()
    assignment = CoachAssignment(
        coach_id=coach_id,
        batch_id=batch_id,
        assigned_by=assigned_by,
        assigned_at=now,
        is_active=True,
        notes=notes,
        created_at=now,
        updated_at=now,
    )
    db.add(assignment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("concurrent assignment detected for coach=%s batch=%s", coach_id, batch_id)
        raise DuplicateAssignment()
    db.refresh(assignment)
    logger.info(
        "assigned coach=%s to batch=%s (assignment=%s, by=%s)",
        coach_id, batch_id, assignment.assignment_id, assigned_by,
    )
    return assignment


def remove_coach_assignment(db: Session, assignment_id: int) -> dict:
    assignment = db.query(CoachAssignment).filter(CoachAssignment.assignment_id == assignment_id).first()
    if not assignment:
        raise AssignmentNotFound()

    if assignment.is_active:
        assignment.is_active = False
        assignment.updated_at = utcnow()
        db.commit()
        logger.info("deactivated assignment=%s", assignment_id)
    return {"success": True}


def _active_assignments_for_coach(db: Session, coach_id: int) -> list[CoachAssignment]:
    return (
        db.query(CoachAssignment)
        .filter(
            CoachAssignment.coach_id == coach_id,
            CoachAssignment.is_active == True,  # noqa: E712
        )
        .order_by(CoachAssignment.assignment_id.asc())
        .all()
    )


def get_coach_batches(db: Session, coach_id: int) -> list[dict]:
    """Batches the coach is actively assigned to, with their active students."""
    result = []
    for assignment in _active_assignments_for_coach(db, coach_id):
        batch = db.query(Batch).filter(Batch.batch_id == assignment.batch_id).first()
        if not batch:
            continue

        students = []
        for enrollment in get_active_enrollments(db, batch.batch_id):
            summary = student_summary(enrollment.user)
            if summary is None:
                continue
            students.append({
                "enrollment_id": enrollment.enrollment_id,
                "user_id": enrollment.user_id,
                "batch_id": enrollment.batch_id,
                "package_type": enrollment.package_type,
                "sessions_total": enrollment.sessions_total,
                "sessions_attended": enrollment.sessions_attended,
                "enrollment_status": enrollment.enrollment_status,
                "start_date": enrollment.start_date,
                "end_date": enrollment.end_date,
                "updated_at": enrollment.updated_at,
                "student": summary,
            })

        payload = batch_detail(db, batch, enrollment_count=len(students))
        payload["assignment"] = assignment
        payload["students"] = students
        payload["total_students"] = len(students)
        result.append(payload)
    return result


def get_coach_batches_by_phone(db: Session, phone: str) -> list[dict]:
    """Batches reachable by a coach's phone: active assignments first, then legacy coach_name matches."""
    coach = db.query(User).filter(User.phone == phone, User.user_type == COACH).first()
    if not coach:
        return []

    batches: list[Batch] = []
    for assignment in _active_assignments_for_coach(db, coach.user_id):
        batch = db.query(Batch).filter(Batch.batch_id == assignment.batch_id).first()
        if batch:
            batches.append(batch)

    legacy_name = coach.name or coach.phone
    batches.extend(
        db.query(Batch)
        .filter(Batch.coach_name == legacy_name)
        .order_by(Batch.batch_id.asc())
        .all()
    )

    seen: set[int] = set()
    unique = []
    for batch in batches:
        if batch.batch_id in seen:
            continue
        seen.add(batch.batch_id)
        unique.append(batch_detail(db, batch))
    return unique


def get_batch_assignments(db: Session, batch_id: Optional[int] = None) -> list[dict]:
    q = db.query(CoachAssignment).filter(CoachAssignment.is_active == True)  # noqa: E712
    if batch_id is not None:
        q = q.filter(CoachAssignment.batch_id == batch_id)
    assignments = q.order_by(CoachAssignment.assignment_id.asc()).all()

    details = []
    for assignment in assignments:
        coach = assignment.coach
        batch = assignment.batch
        if not coach or not batch:
            continue
        assigner = assignment.assigner
        details.append({
            "assignment_id": assignment.assignment_id,
            "coach_id": assignment.coach_id,
            "batch_id": assignment.batch_id,
            "assigned_by": assignment.assigned_by,
            "assigned_at": assignment.assigned_at,
            "is_active": assignment.is_active,
            "notes": assignment.notes,
            "created_at": assignment.created_at,
            "updated_at": assignment.updated_at,
            "coach": coach_summary(coach),
            "batch": batch_detail(db, batch),
            "assigner": {
                "user_id": assigner.user_id if assigner else None,
                "name": assigner.display_name if assigner else None,
            },
        })
    return details
