from pymongo.errors import ServerSelectionTimeoutError

from main import app
from scholarships import repository as scholarship_repository
from scholarships import router as scholarships_router

from .conftest import FailingScholarshipStore


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "OK", "message": "Server is healthy"}


def test_list_without_params_is_bare_array(client):
    resp = client.get("/api/scholarships")
    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert len(body) == 12
    assert body[0]["scholarshipName"] == "Scholarship 12"


def test_list_with_page_is_envelope(client):
    resp = client.get("/api/scholarships", params={"page": 2, "limit": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert [item["scholarshipName"] for item in body["items"]] == [
        "Scholarship 7",
        "Scholarship 6",
        "Scholarship 5",
        "Scholarship 4",
        "Scholarship 3",
    ]
    assert body["pagination"] == {"total": 12, "page": 2, "limit": 5, "totalPages": 3, "hasMore": True}


def test_non_numeric_page_is_not_a_validation_error(client):
    resp = client.get("/api/scholarships", params={"page": "abc"})
    assert resp.status_code == 200
    assert resp.json()["pagination"]["page"] == 1


def test_long_search_text_is_accepted(client):
    resp = client.get("/api/scholarships", params={"search": "a" * 201, "country": "b" * 150, "category": "c" * 150})
    assert resp.status_code == 200
    body = resp.json()
    assert body["items"] == []
    assert body["filters"]["search"] == "a" * 201


def test_huge_page_degrades_to_first_page(client):
    resp = client.get("/api/scholarships", params={"page": str(2**62), "limit": str(2**62)})
    assert resp.status_code == 200
    assert resp.json()["pagination"]["page"] == 1
    assert resp.json()["pagination"]["limit"] == 10


def test_store_failure_is_500_with_message(client):
    app.dependency_overrides[scholarships_router.get_scholarship_store] = lambda: FailingScholarshipStore(
        ServerSelectionTimeoutError("no servers available")
    )
    resp = client.get("/api/scholarships")
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Database operation failed.", "error": "no servers available"}


def test_get_by_malformed_id_is_400(client):
    resp = client.get("/api/scholarships/not-an-id")
    assert resp.status_code == 400


def test_get_missing_is_404(client, monkeypatch):
    async def fake_get(_):
        return None

    monkeypatch.setattr(scholarship_repository, "get_scholarship", fake_get)
    resp = client.get("/api/scholarships/" + "0" * 24)
    assert resp.status_code == 404


def test_related_uses_same_category(client, monkeypatch, scholarships):
    target = scholarships[2]  # index 3, Engineering

    async def fake_get(_):
        return target

    monkeypatch.setattr(scholarship_repository, "get_scholarship", fake_get)
    resp = client.get(f"/api/scholarships/{target['_id']}/related")
    assert resp.status_code == 200
    names = [item["scholarshipName"] for item in resp.json()]
    assert names == ["Scholarship 12", "Scholarship 9", "Scholarship 6"]


def test_create_requires_token(client):
    resp = client.post("/api/scholarships", json={})
    assert resp.status_code == 401


def test_create_requires_admin(client, login):
    login("student@example.com")
    resp = client.post(
        "/api/scholarships",
        json={
            "scholarshipName": "X",
            "universityName": "Y",
            "universityCountry": "USA",
            "subjectCategory": "Engineering",
            "degree": "Masters",
        },
    )
    assert resp.status_code == 403


def test_admin_creates_scholarship(client, login, monkeypatch):
    inserted = {}

    async def fake_insert(document):
        inserted.update(document)
        return "1" * 24

    monkeypatch.setattr(scholarship_repository, "insert_scholarship", fake_insert)
    login("admin@example.com")
    resp = client.post(
        "/api/scholarships",
        json={
            "scholarshipName": "Global Engineers",
            "universityName": "MIT",
            "universityCountry": "USA",
            "subjectCategory": "Engineering",
            "degree": "Masters",
            "applicationFees": 25,
        },
    )
    assert resp.status_code == 201
    assert resp.json() == {"message": "Scholarship created successfully", "insertedId": "1" * 24}
    assert inserted["postedUserEmail"] == "admin@example.com"
    assert inserted["scholarshipPostDate"] is not None


def test_update_unknown_is_404(client, login, monkeypatch):
    async def fake_update(_, fields):
        return 0, 0

    monkeypatch.setattr(scholarship_repository, "update_scholarship", fake_update)
    login("admin@example.com")
    resp = client.put("/api/scholarships/" + "0" * 24, json={"applicationFees": 10})
    assert resp.status_code == 404


def test_delete_as_admin(client, login, monkeypatch):
    async def fake_delete(_):
        return 1

    monkeypatch.setattr(scholarship_repository, "delete_scholarship", fake_delete)
    login("admin@example.com")
    resp = client.delete("/api/scholarships/" + "0" * 24)
    assert resp.status_code == 200
    assert resp.json()["deletedCount"] == 1
