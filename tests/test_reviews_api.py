from reviews import repository as review_repository

SCHOLARSHIP_ID = "6" * 24


def test_review_average(client, monkeypatch):
    async def fake_list(_):
        return [{"ratingPoint": 5}, {"ratingPoint": 4}, {"ratingPoint": 4}]

    monkeypatch.setattr(review_repository, "list_reviews_for_scholarship", fake_list)
    body = client.get(f"/api/reviews/scholarship/{SCHOLARSHIP_ID}").json()
    assert body["count"] == 3
    assert body["averageRating"] == 4.33


def test_review_rating_bounds(client, login):
    login("student@example.com")
    resp = client.post("/api/reviews", json={"scholarshipId": SCHOLARSHIP_ID, "ratingPoint": 6})
    assert resp.status_code == 422
