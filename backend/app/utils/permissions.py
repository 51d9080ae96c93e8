"""Shared permission helpers."""

from sqlalchemy.orm import Session

from app.models.coach_assignment import CoachAssignment
from app.models.enrollment import UserEnrollment
from app.models.user import User


ADMIN = "admin"
COACH = "coach"
STUDENT = "student"

ADMIN_COACH = (ADMIN, COACH)
ALL_USER_TYPES = (ADMIN, COACH, STUDENT)


def is_admin(user: User) -> bool:
    return user.user_type == ADMIN


def is_coach(user: User) -> bool:
    return user.user_type == COACH


def is_student(user: User) -> bool:
    return user.user_type == STUDENT


def is_assigned_coach(db: Session, user: User, batch_id: int) -> bool:
    if not is_coach(user):
        return False
    return (
        db.query(CoachAssignment.assignment_id)
        .filter(
            CoachAssignment.coach_id == user.user_id,
            CoachAssignment.batch_id == batch_id,
            CoachAssignment.is_active == True,  # noqa: E712
        )
        .first()
        is not None
    )


def can_manage_batch_attendance(db: Session, user: User, batch_id: int) -> bool:
    """Admins may act on any batch; coaches only on batches they are actively assigned to."""
    if is_admin(user):
        return True
    return is_assigned_coach(db, user, batch_id)


def can_view_enrollment(db: Session, user: User, enrollment: UserEnrollment) -> bool:
    if is_student(user):
        return enrollment.user_id == user.user_id
    return can_manage_batch_attendance(db, user, enrollment.batch_id)
