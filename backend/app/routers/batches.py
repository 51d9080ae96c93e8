"""Batches API router. Read-only; batches are created by the enrollment flow."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.batch import BatchDetailOut
from app.services import batch_service
from app.middleware.auth_middleware import get_current_user
from app.models.user import User

router = APIRouter(prefix="/api/batches", tags=["batches"])


@router.get("", response_model=List[BatchDetailOut])
def list_batches(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return batch_service.get_active_batches(db)


@router.get("/{batch_id}", response_model=BatchDetailOut)
def get_batch(batch_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return batch_service.get_batch(db, batch_id)
