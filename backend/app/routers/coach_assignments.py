"""Coach assignment API router (admin only)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_roles
from app.models.user import User
from app.schemas.coach_assignment import (
    AssignmentCreate,
    AssignmentCreated,
    AssignmentDetailOut,
    AssignmentRemoved,
)
from app.services import assignment_service

router = APIRouter(prefix="/api/coach-assignments", tags=["coach-assignments"])


@router.get("", response_model=List[AssignmentDetailOut])
def list_assignments(
    batch_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return assignment_service.get_batch_assignments(db, batch_id)


@router.post("", response_model=AssignmentCreated)
def assign_coach(
    data: AssignmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    # assigned_by always comes from the authenticated admin
    assignment = assignment_service.assign_coach_to_batch(
        db,
        data.coach_id,
        data.batch_id,
        assigned_by=current_user.user_id,
        notes=data.notes,
    )
    return {"assignment_id": assignment.assignment_id}


@router.delete("/{assignment_id}", response_model=AssignmentRemoved)
def remove_assignment(
    assignment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return assignment_service.remove_coach_assignment(db, assignment_id)
