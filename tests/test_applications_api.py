from applications import repository as application_repository
from scholarships import repository as scholarship_repository

APPLICATION_ID = "5" * 24
SCHOLARSHIP_ID = "6" * 24


def _pending_application(email="student@example.com", status="pending"):
    return {"_id": APPLICATION_ID, "userEmail": email, "scholarshipId": SCHOLARSHIP_ID, "status": status}


def test_apply_records_caller_and_pending_status(client, login, monkeypatch):
    inserted = {}

    async def fake_get_scholarship(_):
        return {"_id": SCHOLARSHIP_ID}

    async def fake_find(*, email, scholarship_id):
        return None

    async def fake_insert(document):
        inserted.update(document)
        return APPLICATION_ID

    monkeypatch.setattr(scholarship_repository, "get_scholarship", fake_get_scholarship)
    monkeypatch.setattr(application_repository, "find_user_application", fake_find)
    monkeypatch.setattr(application_repository, "insert_application", fake_insert)
    login("student@example.com", name="Stu Dent")

    resp = client.post("/api/applications", json={"scholarshipId": SCHOLARSHIP_ID, "applicationFees": 20})
    assert resp.status_code == 201
    assert resp.json()["insertedId"] == APPLICATION_ID
    assert inserted["userEmail"] == "student@example.com"
    assert inserted["userName"] == "Stu Dent"
    assert inserted["status"] == "pending"
    assert inserted["paymentStatus"] == "unpaid"


def test_duplicate_application_is_409(client, login, monkeypatch):
    async def fake_get_scholarship(_):
        return {"_id": SCHOLARSHIP_ID}

    async def fake_find(*, email, scholarship_id):
        return _pending_application()

    monkeypatch.setattr(scholarship_repository, "get_scholarship", fake_get_scholarship)
    monkeypatch.setattr(application_repository, "find_user_application", fake_find)
    login("student@example.com")

    resp = client.post("/api/applications", json={"scholarshipId": SCHOLARSHIP_ID})
    assert resp.status_code == 409


def test_status_must_be_known_value(client, login):
    login("mod@example.com")
    resp = client.patch(f"/api/applications/{APPLICATION_ID}", json={"status": "rejected"})
    assert resp.status_code == 422


def test_moderator_updates_status(client, login, monkeypatch):
    fields_seen = {}

    async def fake_update(_, fields):
        fields_seen.update(fields)
        return 1, 1

    monkeypatch.setattr(application_repository, "update_application", fake_update)
    login("mod@example.com")
    resp = client.patch(
        f"/api/applications/{APPLICATION_ID}",
        json={"status": "processing", "feedback": "Documents received"},
    )
    assert resp.status_code == 200
    assert fields_seen == {"status": "processing", "feedback": "Documents received"}


def test_students_only_see_their_own_applications(client, login):
    login("student@example.com")
    assert client.get("/api/applications/user/other@example.com").status_code == 403


def test_student_cannot_withdraw_processed_application(client, login, monkeypatch):
    async def fake_get(_):
        return _pending_application(status="processing")

    monkeypatch.setattr(application_repository, "get_application", fake_get)
    login("student@example.com")
    assert client.delete(f"/api/applications/{APPLICATION_ID}").status_code == 400
