"""Pydantic schemas for user request/response contracts."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserOut(BaseModel):
    user_id: int
    user_type: str
    name: str
    full_name: Optional[str] = None
    phone: str
    email: Optional[str] = None
    student_code: Optional[str] = None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class StudentSummary(BaseModel):
    user_id: int
    name: str
    student_code: Optional[str] = None
    phone: Optional[str] = None


class CoachSummary(BaseModel):
    user_id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class CoachListItem(CoachSummary):
    student_code: Optional[str] = None
    created_at: Optional[datetime] = None


class CoachCreate(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    full_name: Optional[str] = None


class LoginRequest(BaseModel):
    phone: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
