"""Coach directory API router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import get_current_user, require_roles
from app.models.user import User
from app.schemas.batch import BatchDetailOut
from app.schemas.coach_assignment import CoachBatchOut
from app.schemas.user import CoachCreate, CoachListItem, UserOut
from app.services import assignment_service, user_service
from app.utils.permissions import is_admin, is_coach

router = APIRouter(prefix="/api/coaches", tags=["coaches"])


@router.get("", response_model=List[CoachListItem])
def list_coaches(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return user_service.get_all_coaches(db)


@router.post("", response_model=UserOut)
def create_coach(
    data: CoachCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return user_service.create_coach(db, data.name, data.phone, email=data.email, full_name=data.full_name)


@router.get("/me/batches", response_model=List[CoachBatchOut])
def my_batches(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("coach")),
):
    return assignment_service.get_coach_batches(db, current_user.user_id)


@router.get("/by-phone/{phone}/batches", response_model=List[BatchDetailOut])
def batches_by_phone(
    phone: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles("admin")),
):
    return assignment_service.get_coach_batches_by_phone(db, phone)


@router.get("/{coach_id}/batches", response_model=List[CoachBatchOut])
def coach_batches(
    coach_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not (is_admin(current_user) or (is_coach(current_user) and current_user.user_id == coach_id)):
        raise HTTPException(status_code=403, detail="Not allowed to view this coach's batches.")
    return assignment_service.get_coach_batches(db, coach_id)
