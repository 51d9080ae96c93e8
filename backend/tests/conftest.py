import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.models.catalog import SportsProgram, Location
from app.models.batch import Batch
from app.models.enrollment import UserEnrollment
from app.models.coach_assignment import CoachAssignment
from app.utils.helpers import utcnow
from datetime import date

TEST_DB_URL = "sqlite:///./test_sports.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(user_type="admin", name="Admin Rao", phone="9000000001"),
        "coach": User(user_type="coach", name="Coach Priya", phone="9000000002", email="priya@academy.example"),
        "coach2": User(user_type="coach", name="Coach Arjun", phone="9000000003"),
        "student": User(user_type="student", name="Kavya", full_name="Kavya Menon",
                        phone="9000000101", student_code="PLYG101"),
        "student2": User(user_type="student", name="Rohan", full_name="Rohan Das",
                         phone="9000000102", student_code="PLYG102"),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_batch(db, seed_users):
    sport = SportsProgram(name="Badminton")
    location = Location(name="Indiranagar Arena", city="Bengaluru")
    db.add_all([sport, location])
    db.flush()
    batch = Batch(
        sport_id=sport.sport_id,
        location_id=location.location_id,
        batch_name="Badminton Juniors - Evening",
        coach_name="Coach Arjun",
        schedule=[{"day": "Monday", "start_time": "18:00", "end_time": "19:30"}],
        max_capacity=16,
        start_date=date(2026, 1, 5),
    )
    db.add(batch)
    db.commit()
    db.refresh(batch)
    return batch


def make_enrollment(db, user, batch, sessions_total=10, sessions_attended=0, status="active"):
    enrollment = UserEnrollment(
        user_id=user.user_id,
        batch_id=batch.batch_id,
        package_type="1 month",
        sessions_total=sessions_total,
        sessions_attended=sessions_attended,
        enrollment_status=status,
    )
    db.add(enrollment)
    db.commit()
    db.refresh(enrollment)
    return enrollment


@pytest.fixture
def seed_enrollments(db, seed_users, seed_batch):
    return {
        "student": make_enrollment(db, seed_users["student"], seed_batch, sessions_total=10, sessions_attended=3),
        "student2": make_enrollment(db, seed_users["student2"], seed_batch, sessions_total=8, sessions_attended=0),
    }


@pytest.fixture
def seed_assignment(db, seed_users, seed_batch):
    now = utcnow()
    assignment = CoachAssignment(
        coach_id=seed_users["coach"].user_id,
        batch_id=seed_batch.batch_id,
        assigned_by=seed_users["admin"].user_id,
        assigned_at=now,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    return assignment


def get_token(client, phone: str) -> str:
    resp = client.post("/api/auth/login", json={"phone": phone})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, phone: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, phone)}"}
