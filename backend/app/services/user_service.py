"""User directory service layer: coach listing and coach provisioning."""

import logging

from sqlalchemy.orm import Session

from app.models.user import User
from app.utils.helpers import utcnow
from app.utils.permissions import COACH

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.user_id == user_id).first()


def get_user_by_phone(db: Session, phone: str) -> User | None:
    return db.query(User).filter(User.phone == phone).first()


def get_all_coaches(db: Session) -> list[dict]:
    coaches = (
        db.query(User)
        .filter(User.user_type == COACH, User.status == "active")
        .order_by(User.user_id.asc())
        .all()
    )
    return [
        {
            "user_id": coach.user_id,
            "name": coach.display_name,
            "email": coach.email,
            "phone": coach.phone,
            "student_code": coach.student_code,
            "created_at": coach.created_at,
        }
        for coach in coaches
    ]


def create_coach(db: Session, name: str, phone: str, email: str | None = None, full_name: str | None = None) -> User:
    """Create an active coach, or promote the existing user registered with the same phone."""
    user = get_user_by_phone(db, phone)
    if user:
        user.user_type = COACH
        user.name = name
        user.full_name = full_name or name
        user.email = email
        user.status = "active"
        user.updated_at = utcnow()
        logger.info("promoted user %s to coach", user.user_id)
    else:
        user = User(
            user_type=COACH,
            name=name,
            full_name=full_name or name,
            email=email,
            phone=phone,
            status="active",
        )
        db.add(user)
    db.commit()
    db.refresh(user)
    return user
