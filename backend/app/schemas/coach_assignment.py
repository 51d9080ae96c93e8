"""Coach assignment request/response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.schemas.batch import BatchDetailOut
from app.schemas.enrollment import EnrolledStudentOut
from app.schemas.user import CoachSummary


class AssignmentCreate(BaseModel):
    coach_id: int
    batch_id: int
    notes: Optional[str] = None


class AssignmentCreated(BaseModel):
    assignment_id: int


class AssignmentRemoved(BaseModel):
    success: bool


class AssignmentOut(BaseModel):
    assignment_id: int
    coach_id: int
    batch_id: int
    assigned_by: int
    assigned_at: datetime
    is_active: bool
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AssignerSummary(BaseModel):
    user_id: Optional[int] = None
    name: Optional[str] = None


class AssignmentDetailOut(AssignmentOut):
    coach: CoachSummary
    batch: BatchDetailOut
    assigner: AssignerSummary


class CoachBatchOut(BatchDetailOut):
    assignment: AssignmentOut
    students: List[EnrolledStudentOut]
    total_students: int
