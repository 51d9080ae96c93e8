"""Pydantic schemas for batch, sport and location payloads."""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date, datetime


class ScheduleSlot(BaseModel):
    day: str
    start_time: str
    end_time: Optional[str] = None


class SportOut(BaseModel):
    sport_id: int
    name: str

    model_config = {"from_attributes": True}


class LocationOut(BaseModel):
    location_id: int
    name: str
    address: Optional[str] = None
    city: Optional[str] = None

    model_config = {"from_attributes": True}


class BatchOut(BaseModel):
    batch_id: int
    sport_id: int
    location_id: int
    batch_name: str
    coach_name: Optional[str] = None
    schedule: Optional[List[ScheduleSlot]] = None
    max_capacity: int = 0
    start_date: date
    end_date: Optional[date] = None
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BatchDetailOut(BatchOut):
    sport: Optional[SportOut] = None
    location: Optional[LocationOut] = None
    current_enrollments: int = 0
