from factories import hours_ago, make_application, make_candidate, make_interview, make_job, minutes_from_now


def _seed(db):
    job = make_job(db, title="Backend Engineer", department="Engineering")
    a = make_candidate(db, "a@x.com", name="Ann")
    b = make_candidate(db, "b@x.com", name="Ben")
    old = make_application(db, job, a, status="screening", score=60, applied_at=hours_ago(5))
    new = make_application(db, job, b, status="offer", score=80, applied_at=hours_ago(1))
    return job, old, new


def test_list_applications_newest_first(db_client, db_session):
    _, old, new = _seed(db_session)
    resp = db_client.get("/applications")
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()] == [new.id, old.id]


def test_recent_applications_respects_limit(db_client, db_session):
    _, _, new = _seed(db_session)
    resp = db_client.get("/applications/recent", params={"limit": 1})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 1
    assert data[0]["id"] == new.id
    assert data[0]["candidate_name"] == "Ben"
    assert data[0]["job_title"] == "Backend Engineer"


def test_recent_applications_limit_bounds(db_client):
    assert db_client.get("/applications/recent", params={"limit": 0}).status_code == 422
    assert db_client.get("/applications/recent", params={"limit": 101}).status_code == 422


def test_pipeline_columns(db_client, db_session):
    _, old, new = _seed(db_session)
    resp = db_client.get("/applications/pipeline")
    assert resp.status_code == 200
    columns = {c["status"]: c for c in resp.json()}
    assert list(columns) == ["applied", "screening", "interview", "offer", "hired", "rejected"]
    assert columns["applied"]["count"] == 0
    assert [c["id"] for c in columns["screening"]["applications"]] == [old.id]
    assert columns["offer"]["applications"][0]["candidate_email"] == "b@x.com"


def test_get_application_detail_with_interviews(db_client, db_session):
    job, old, _ = _seed(db_session)
    make_interview(db_session, old, minutes_from_now(90))
    resp = db_client.get(f"/applications/{old.id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["candidate"]["name"] == "Ann"
    assert body["job"]["id"] == job.id
    assert len(body["interviews"]) == 1


def test_get_application_not_found(db_client):
    resp = db_client.get("/applications/missing")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Application not found"


def test_update_status_any_direction(db_client, db_session):
    _, _, new = _seed(db_session)
    r1 = db_client.patch(f"/applications/{new.id}/status", json={"status": "rejected"})
    r2 = db_client.patch(f"/applications/{new.id}/status", json={"status": "applied"})
    assert r1.status_code == 200 and r1.json()["status"] == "rejected"
    assert r2.status_code == 200 and r2.json()["status"] == "applied"
    assert r2.json()["match_score"] == 80

    board = {c["status"]: c["count"] for c in db_client.get("/applications/pipeline").json()}
    assert board["applied"] == 1 and board["offer"] == 0


def test_update_status_rejects_unknown_status(db_client, db_session):
    _, _, new = _seed(db_session)
    resp = db_client.patch(f"/applications/{new.id}/status", json={"status": "archived"})
    assert resp.status_code == 422


def test_update_status_missing_application(db_client):
    resp = db_client.patch("/applications/missing/status", json={"status": "hired"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Application not found"
