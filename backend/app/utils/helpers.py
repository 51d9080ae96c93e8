import math
from datetime import datetime, timezone
from typing import Optional

from app.models.user import User


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def percentage(numerator: int, denominator: int) -> int:
    """Whole-number percentage rounded half up; 0 when the denominator is 0."""
    if not denominator:
        return 0
    return int(math.floor(numerator * 100 / denominator + 0.5))


def student_summary(user: Optional[User]) -> Optional[dict]:
    if user is None:
        return None
    return {
        "user_id": user.user_id,
        "name": user.display_name,
        "student_code": user.student_code,
        "phone": user.phone,
    }


def coach_summary(user: User) -> dict:
    return {
        "user_id": user.user_id,
        "name": user.display_name,
        "email": user.email,
        "phone": user.phone,
    }
