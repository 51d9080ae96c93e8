"""Batch service layer. Batches are owned by the enrollment flow; this module only reads them."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.errors import BatchNotFound
from app.models.batch import Batch
from app.models.enrollment import UserEnrollment
from app.schemas.batch import BatchOut


def get_batch_or_raise(db: Session, batch_id: int) -> Batch:
    batch = db.query(Batch).filter(Batch.batch_id == batch_id).first()
    if not batch:
        raise BatchNotFound()
    return batch


def get_active_enrollments(db: Session, batch_id: int) -> list[UserEnrollment]:
    return (
        db.query(UserEnrollment)
        .filter(
            UserEnrollment.batch_id == batch_id,
            UserEnrollment.enrollment_status == "active",
        )
        .order_by(UserEnrollment.enrollment_id.asc())
        .all()
    )


def count_active_enrollments(db: Session, batch_id: int) -> int:
    return (
        db.query(func.count(UserEnrollment.enrollment_id))
        .filter(
            UserEnrollment.batch_id == batch_id,
            UserEnrollment.enrollment_status == "active",
        )
        .scalar()
    ) or 0


def batch_detail(db: Session, batch: Batch, enrollment_count: int | None = None) -> dict:
    payload = BatchOut.model_validate(batch).model_dump()
    payload["sport"] = batch.sport
    payload["location"] = batch.location
    payload["current_enrollments"] = (
        enrollment_count if enrollment_count is not None else count_active_enrollments(db, batch.batch_id)
    )
    return payload


def get_active_batches(db: Session) -> list[dict]:
    rows = (
        db.query(Batch)
        .filter(Batch.is_active == True)  # noqa: E712
        .order_by(Batch.batch_id.asc())
        .all()
    )
    return [batch_detail(db, row) for row in rows]


def get_batch(db: Session, batch_id: int) -> dict:
    return batch_detail(db, get_batch_or_raise(db, batch_id))
