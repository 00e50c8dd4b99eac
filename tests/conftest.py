from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from core import filters
from main import app
from auth import dependencies as auth_dependencies
from scholarships import router as scholarships_router
from users import repository as user_repository

BASE_DATE = datetime(2025, 1, 1, tzinfo=timezone.utc)

CATEGORIES = ["Engineering", "Medical", "Business"]
COUNTRIES = ["USA", "Germany", "Canada", "Japan"]


def matches(node: filters.Filter, doc: Dict[str, Any]) -> bool:
    """Evaluate a filter tree against one document, Mongo-style."""
    if isinstance(node, filters.MatchAll):
        return True
    if isinstance(node, filters.Contains):
        return node.text.lower() in str(doc.get(node.field) or "").lower()
    if isinstance(node, filters.Equals):
        return doc.get(node.field) == node.value
    if isinstance(node, filters.NotEquals):
        return doc.get(node.field) != node.value
    if isinstance(node, filters.And):
        return all(matches(f, doc) for f in node.filters)
    if isinstance(node, filters.Or):
        return any(matches(f, doc) for f in node.filters)
    raise TypeError(node)


class InMemoryScholarshipStore:
    """Scholarship store over a list of dicts; records every call."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = list(documents)
        self.find_calls: List[Dict[str, Any]] = []
        self.count_calls = 0

    async def find(
        self,
        query: filters.Filter,
        *,
        sort: filters.Sort,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        self.find_calls.append({"query": query, "sort": sort, "skip": skip, "limit": limit})
        rows = [d for d in self.documents if matches(query, d)]
        rows.sort(key=lambda d: d[sort.field], reverse=sort.descending)
        rows = rows[skip:]
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def count(self, query: filters.Filter) -> int:
        self.count_calls += 1
        return sum(1 for d in self.documents if matches(query, d))


class FailingScholarshipStore:
    def __init__(self, exc: Exception):
        self.exc = exc

    async def find(self, query, *, sort, skip=0, limit=None):
        raise self.exc

    async def count(self, query):
        raise self.exc


def make_scholarship(index: int, **overrides: Any) -> Dict[str, Any]:
    doc = {
        "_id": f"{index:024x}",
        "scholarshipName": f"Scholarship {index}",
        "universityName": f"University {index}",
        "degree": "Masters" if index % 2 else "Bachelor",
        "universityCountry": COUNTRIES[index % len(COUNTRIES)],
        "subjectCategory": CATEGORIES[index % len(CATEGORIES)],
        "applicationFees": float((index * 7) % 13),
        # Higher index means posted later.
        "scholarshipPostDate": (BASE_DATE + timedelta(days=index)).isoformat(),
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def scholarships() -> List[Dict[str, Any]]:
    return [make_scholarship(i) for i in range(1, 13)]


@pytest.fixture
def store(scholarships) -> InMemoryScholarshipStore:
    return InMemoryScholarshipStore(scholarships)


@pytest.fixture
def users(monkeypatch) -> Dict[str, Dict[str, Any]]:
    """Role table backing the auth gates, keyed by email."""
    table: Dict[str, Dict[str, Any]] = {
        "admin@example.com": {"_id": "a" * 24, "email": "admin@example.com", "name": "Admin", "role": "admin"},
        "mod@example.com": {"_id": "b" * 24, "email": "mod@example.com", "name": "Mod", "role": "moderator"},
        "student@example.com": {"_id": "c" * 24, "email": "student@example.com", "name": "Stu", "role": "student"},
    }

    async def fake_get_user_by_email(email: str):
        return table.get(user_repository.normalize_email(email))

    monkeypatch.setattr(user_repository, "get_user_by_email", fake_get_user_by_email)
    return table


@pytest.fixture
def client(store, users):
    app.dependency_overrides[scholarships_router.get_scholarship_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def login():
    """Make requests run as the given email (no token verification)."""

    def _login(email: str, name: Optional[str] = None) -> None:
        app.dependency_overrides[auth_dependencies.get_current_user] = lambda: {
            "uid": "uid-" + email,
            "email": email,
            "name": name,
        }

    return _login
