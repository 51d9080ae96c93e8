from tests.conftest import auth_headers, make_enrollment


def test_list_active_batches(client, db, seed_users, seed_batch, seed_enrollments):
    make_enrollment(db, seed_users["coach2"], seed_batch, status="cancelled")
    headers = auth_headers(client, "9000000101")
    resp = client.get("/api/batches", headers=headers)
    assert resp.status_code == 200
    rows = resp.json()
    assert len(rows) == 1
    assert rows[0]["current_enrollments"] == 2
    assert rows[0]["location"]["city"] == "Bengaluru"
    assert rows[0]["schedule"][0]["day"] == "Monday"


def test_inactive_batches_hidden(client, db, seed_batch):
    seed_batch.is_active = False
    db.commit()
    headers = auth_headers(client, "9000000001")
    assert client.get("/api/batches", headers=headers).json() == []
    assert client.get(f"/api/batches/{seed_batch.batch_id}", headers=headers).status_code == 200


def test_get_batch_not_found(client, seed_users):
    headers = auth_headers(client, "9000000001")
    resp = client.get("/api/batches/999", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "BATCH_NOT_FOUND"
