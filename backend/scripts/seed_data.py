"""Seed the database with demo coaches, students, batches and enrollments."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from datetime import date, datetime, timezone

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.models.catalog import SportsProgram, Location
from app.models.batch import Batch
from app.models.enrollment import UserEnrollment
from app.models.coach_assignment import CoachAssignment

logger = logging.getLogger("seed_data")


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            logger.info("database already seeded; skipping")
            return

        users = [
            User(user_type="admin", name="Admin Rao", phone="9000000001", email="admin@academy.example"),
            User(user_type="coach", name="Coach Priya", phone="9000000002", email="priya@academy.example"),
            User(user_type="coach", name="Coach Arjun", phone="9000000003", email="arjun@academy.example"),
            User(user_type="student", name="Kavya", full_name="Kavya Menon", phone="9000000101", student_code="PLYG101"),
            User(user_type="student", name="Rohan", full_name="Rohan Das", phone="9000000102", student_code="PLYG102"),
            User(user_type="student", name="Aisha", full_name="Aisha Khan", phone="9000000103", student_code="PLYG103"),
        ]
        db.add_all(users)
        db.flush()
        admin, priya, arjun, kavya, rohan, aisha = users

        sports = [
            SportsProgram(name="Badminton", description="Singles and doubles fundamentals"),
            SportsProgram(name="Football", description="Youth football development"),
        ]
        locations = [
            Location(name="Indiranagar Arena", address="100 Feet Road", city="Bengaluru"),
            Location(name="HSR Sports Hub", address="27th Main", city="Bengaluru"),
        ]
        db.add_all(sports + locations)
        db.flush()

        batches = [
            Batch(
                sport_id=sports[0].sport_id,
                location_id=locations[0].location_id,
                batch_name="Badminton Juniors - Evening",
                coach_name="Coach Priya",
                schedule=[
                    {"day": "Monday", "start_time": "18:00", "end_time": "19:30"},
                    {"day": "Wednesday", "start_time": "18:00", "end_time": "19:30"},
                ],
                max_capacity=16,
                start_date=date(2026, 1, 5),
            ),
            Batch(
                sport_id=sports[1].sport_id,
                location_id=locations[1].location_id,
                batch_name="Football U12 - Weekend",
                coach_name="Coach Arjun",
                schedule=[{"day": "Saturday", "start_time": "07:00", "end_time": "08:30"}],
                max_capacity=22,
                start_date=date(2026, 1, 10),
            ),
        ]
        db.add_all(batches)
        db.flush()

        db.add_all([
            UserEnrollment(user_id=kavya.user_id, batch_id=batches[0].batch_id, package_type="3 months",
                           sessions_total=24, sessions_attended=3, start_date=date(2026, 1, 5)),
            UserEnrollment(user_id=rohan.user_id, batch_id=batches[0].batch_id, package_type="1 month",
                           sessions_total=8, sessions_attended=0, start_date=date(2026, 2, 2)),
            UserEnrollment(user_id=aisha.user_id, batch_id=batches[1].batch_id, package_type="3 months",
                           sessions_total=12, sessions_attended=5, start_date=date(2026, 1, 10)),
        ])

        now = datetime.now(timezone.utc)
        db.add(CoachAssignment(
            coach_id=priya.user_id,
            batch_id=batches[0].batch_id,
            assigned_by=admin.user_id,
            assigned_at=now,
            is_active=True,
            created_at=now,
            updated_at=now,
        ))

        db.commit()
        logger.info("seeded %d users, %d batches", len(users), len(batches))
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    seed()
