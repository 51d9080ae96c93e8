"""Student progress report."""

from datetime import date, timedelta

import pytest

from app.errors import EnrollmentNotFound
from app.services import attendance_service, progress_service
from app.utils.helpers import percentage
from tests.conftest import auth_headers, make_enrollment

ADMIN_PHONE = "9000000001"
COACH_PHONE = "9000000002"
DAY1 = date(2026, 3, 2)


@pytest.mark.parametrize(
    "numerator,denominator,expected",
    [(0, 0, 0), (5, 0, 0), (4, 10, 40), (1, 8, 13), (1, 3, 33), (2, 3, 67), (10, 10, 100)],
)
def test_percentage_rounds_half_up(numerator, denominator, expected):
    assert percentage(numerator, denominator) == expected


def test_mark_present_then_progress_scenario(client, db, seed_enrollments):
    enrollment = seed_enrollments["student"]
    headers = auth_headers(client, ADMIN_PHONE)
    mark = client.post(
        "/api/attendance",
        json={"enrollment_id": enrollment.enrollment_id, "session_date": str(DAY1), "status": "present"},
        headers=headers,
    )
    assert mark.status_code == 200

    resp = client.get(f"/api/enrollments/{enrollment.enrollment_id}/progress", headers=headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["progress"] == {
        "sessions_total": 10,
        "sessions_attended": 4,
        "remaining_sessions": 6,
        "completion_percentage": 40,
        "is_completed": False,
    }
    assert body["attendance"]["total_marked"] == 1
    assert body["attendance"]["present_count"] == 1
    assert body["attendance"]["attendance_rate"] == 100
    assert body["student"]["student_code"] == "PLYG101"
    assert body["batch"]["batch_name"] == "Badminton Juniors - Evening"
    assert body["recent_attendance"][0]["marked_by"] == "Admin Rao"


def test_progress_zero_denominators(db, seed_users, seed_batch):
    enrollment = make_enrollment(db, seed_users["student"], seed_batch, sessions_total=0, sessions_attended=0)
    report = progress_service.get_student_progress(db, enrollment.enrollment_id)
    assert report["progress"]["completion_percentage"] == 0
    assert report["progress"]["is_completed"] is True
    assert report["attendance"]["total_marked"] == 0
    assert report["attendance"]["attendance_rate"] == 0
    assert report["recent_attendance"] == []


def test_progress_counts_each_status(db, seed_enrollments):
    eid = seed_enrollments["student2"].enrollment_id
    for offset, status in enumerate(["present", "absent", "late", "excused", "present"]):
        attendance_service.mark_attendance(db, eid, DAY1 + timedelta(days=offset), status, "Coach Priya")

    attendance = progress_service.get_student_progress(db, eid)["attendance"]
    assert attendance == {
        "total_marked": 5,
        "present_count": 2,
        "absent_count": 1,
        "late_count": 1,
        "excused_count": 1,
        "attendance_rate": 40,
    }


def test_recent_attendance_is_insertion_order_tail(db, seed_users, seed_batch):
    enrollment = make_enrollment(db, seed_users["student"], seed_batch, sessions_total=30)
    eid = enrollment.enrollment_id
    # mark newest session dates first so insertion order and date order disagree
    dates = [DAY1 + timedelta(days=offset) for offset in range(12)]
    for session_date in reversed(dates):
        attendance_service.mark_attendance(db, eid, session_date, "absent", "Coach Priya")

    recent = progress_service.get_student_progress(db, eid)["recent_attendance"]
    assert len(recent) == 10
    assert [r.session_date for r in recent] == list(reversed(dates))[2:]


def test_progress_unknown_enrollment(db, client, seed_users):
    with pytest.raises(EnrollmentNotFound):
        progress_service.get_student_progress(db, 404)

    headers = auth_headers(client, ADMIN_PHONE)
    resp = client.get("/api/enrollments/404/progress", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "ENROLLMENT_NOT_FOUND"


def test_progress_visibility(client, seed_enrollments, seed_assignment):
    own = seed_enrollments["student"].enrollment_id
    other = seed_enrollments["student2"].enrollment_id

    student_headers = auth_headers(client, "9000000101")
    assert client.get(f"/api/enrollments/{own}/progress", headers=student_headers).status_code == 200
    assert client.get(f"/api/enrollments/{other}/progress", headers=student_headers).status_code == 403

    assigned = auth_headers(client, COACH_PHONE)
    assert client.get(f"/api/enrollments/{other}/progress", headers=assigned).status_code == 200

    unassigned = auth_headers(client, "9000000003")
    assert client.get(f"/api/enrollments/{other}/progress", headers=unassigned).status_code == 403
