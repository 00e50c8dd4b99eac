import pytest

from core import db, filters
from scholarships.repository import MongoScholarshipStore


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    async def fake_find_all(name, query=None, *, sort=None, skip=0, limit=0):
        recorded.append({"name": name, "query": query, "sort": sort, "skip": skip, "limit": limit})
        return [{"_id": "0" * 24}]

    async def fake_count(name, query=None):
        recorded.append({"name": name, "query": query})
        return 7

    monkeypatch.setattr(db, "find_all", fake_find_all)
    monkeypatch.setattr(db, "count", fake_count)
    return recorded


@pytest.mark.asyncio
async def test_find_compiles_query_and_sort(calls):
    query = filters.Contains("universityCountry", "u.s")
    rows = await MongoScholarshipStore().find(
        query, sort=filters.Sort(field="applicationFees", descending=False), skip=20, limit=5
    )
    assert rows == [{"_id": "0" * 24}]
    assert calls == [
        {
            "name": "scholarships-collection",
            "query": {"universityCountry": {"$regex": r"u\.s", "$options": "i"}},
            "sort": [("applicationFees", 1)],
            "skip": 20,
            "limit": 5,
        }
    ]


@pytest.mark.asyncio
async def test_find_without_limit_is_unbounded(calls):
    await MongoScholarshipStore().find(filters.MatchAll(), sort=filters.Sort(field="scholarshipPostDate"))
    assert calls[0]["query"] == {}
    assert calls[0]["sort"] == [("scholarshipPostDate", -1)]
    assert calls[0]["skip"] == 0
    assert calls[0]["limit"] == 0


@pytest.mark.asyncio
async def test_count_forwards_compiled_query(calls):
    total = await MongoScholarshipStore().count(filters.Equals("subjectCategory", "Medical"))
    assert total == 7
    assert calls == [{"name": "scholarships-collection", "query": {"subjectCategory": "Medical"}}]
