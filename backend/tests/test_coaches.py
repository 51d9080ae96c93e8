"""Coach directory and coach batch views."""

from app.models.user import User
from app.services import assignment_service
from tests.conftest import auth_headers, make_enrollment

ADMIN_PHONE = "9000000001"
COACH_PHONE = "9000000002"


def test_list_active_coaches(client, db, seed_users):
    seed_users["coach2"].status = "inactive"
    db.commit()

    headers = auth_headers(client, ADMIN_PHONE)
    resp = client.get("/api/coaches", headers=headers)
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Coach Priya"]
    assert resp.json()[0]["email"] == "priya@academy.example"


def test_list_coaches_admin_only(client, seed_users):
    headers = auth_headers(client, COACH_PHONE)
    assert client.get("/api/coaches", headers=headers).status_code == 403


def test_create_coach_new_and_promote(client, db, seed_users):
    headers = auth_headers(client, ADMIN_PHONE)
    created = client.post("/api/coaches", json={"name": "Coach Meera", "phone": "9000000004"}, headers=headers)
    assert created.status_code == 200
    assert created.json()["user_type"] == "coach"
    assert created.json()["full_name"] == "Coach Meera"

    promoted = client.post(
        "/api/coaches",
        json={"name": "Coach Rohan", "phone": "9000000102", "email": "rohan@academy.example"},
        headers=headers,
    )
    assert promoted.status_code == 200
    assert promoted.json()["user_id"] == seed_users["student2"].user_id
    assert db.query(User).filter(User.phone == "9000000102").count() == 1
    db.refresh(seed_users["student2"])
    assert seed_users["student2"].user_type == "coach"


def test_coach_batches_embed_active_students(client, db, seed_users, seed_batch, seed_enrollments, seed_assignment):
    make_enrollment(db, seed_users["coach2"], seed_batch, status="paused")

    headers = auth_headers(client, COACH_PHONE)
    resp = client.get("/api/coaches/me/batches", headers=headers)
    assert resp.status_code == 200
    batches = resp.json()
    assert len(batches) == 1
    batch = batches[0]
    assert batch["batch_id"] == seed_batch.batch_id
    assert batch["assignment"]["assignment_id"] == seed_assignment.assignment_id
    assert batch["total_students"] == 2
    assert [s["student"]["name"] for s in batch["students"]] == ["Kavya", "Rohan"]
    assert batch["sport"]["name"] == "Badminton"

    by_id = client.get(f"/api/coaches/{seed_users['coach'].user_id}/batches", headers=headers)
    assert by_id.status_code == 200
    assert by_id.json() == batches


def test_coach_batches_drop_removed_assignments(db, seed_users, seed_assignment):
    assignment_service.remove_coach_assignment(db, seed_assignment.assignment_id)
    assert assignment_service.get_coach_batches(db, seed_users["coach"].user_id) == []


def test_coach_cannot_view_other_coach_batches(client, seed_users, seed_assignment):
    headers = auth_headers(client, "9000000003")
    resp = client.get(f"/api/coaches/{seed_users['coach'].user_id}/batches", headers=headers)
    assert resp.status_code == 403

    admin_headers = auth_headers(client, ADMIN_PHONE)
    resp = client.get(f"/api/coaches/{seed_users['coach'].user_id}/batches", headers=admin_headers)
    assert resp.status_code == 200


def test_batches_by_phone_merges_legacy_coach_name(client, db, seed_users, seed_batch, seed_enrollments):
    # seed_batch carries the legacy coach_name "Coach Arjun"; the assignment points at the same batch
    assignment_service.assign_coach_to_batch(
        db, seed_users["coach2"].user_id, seed_batch.batch_id, seed_users["admin"].user_id,
    )
    headers = auth_headers(client, ADMIN_PHONE)
    resp = client.get("/api/coaches/by-phone/9000000003/batches", headers=headers)
    assert resp.status_code == 200
    rows = resp.json()
    assert [row["batch_id"] for row in rows] == [seed_batch.batch_id]
    assert rows[0]["current_enrollments"] == 2

    assert client.get("/api/coaches/by-phone/0000/batches", headers=headers).json() == []
    # Priya has neither an assignment nor a legacy name match
    assert client.get("/api/coaches/by-phone/9000000002/batches", headers=headers).json() == []
