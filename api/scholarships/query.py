"""
Scholarship list query: parameter parsing, response-mode selection, and the
filter/sort it translates to.

Everything here is pure; the resolver in `service.py` runs the result against
a store.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping

from core import filters
from core.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MAX_PAGE,
    PageWindow,
    parse_positive_int,
)

SORT_POST_DATE = "postDate"
SORT_APPLICATION_FEES = "applicationFees"
ORDER_ASC = "asc"
ORDER_DESC = "desc"
FORMAT_FULL = "full"

# Query-string field name -> stored document field.
SEARCH_FIELDS = ("scholarshipName", "universityName", "degree")
COUNTRY_FIELD = "universityCountry"
CATEGORY_FIELD = "subjectCategory"
SORT_FIELDS = {
    SORT_APPLICATION_FEES: "applicationFees",
    SORT_POST_DATE: "scholarshipPostDate",
}


class ResponseMode(enum.Enum):
    # Bare list of every match, for clients that predate pagination.
    LEGACY = "legacy"
    PAGINATED = "paginated"


@dataclass(frozen=True)
class ScholarshipQuery:
    search: str = ""
    country: str = ""
    category: str = ""
    sort_by: str = SORT_POST_DATE
    sort_order: str = ORDER_DESC
    window: PageWindow = PageWindow()
    mode: ResponseMode = ResponseMode.LEGACY


def _text(params: Mapping[str, str | None], name: str) -> str:
    return params.get(name) or ""


def select_mode(params: Mapping[str, str | None]) -> ResponseMode:
    """
    Any query parameter at all (or an explicit `format=full`) opts into the
    paginated envelope. A non-default sort alone counts.
    """
    if _text(params, "format") == FORMAT_FULL:
        return ResponseMode.PAGINATED
    for name in ("page", "limit", "search", "country", "category"):
        if _text(params, name):
            return ResponseMode.PAGINATED
    if (params.get("sortBy") or SORT_POST_DATE) != SORT_POST_DATE:
        return ResponseMode.PAGINATED
    if (params.get("sortOrder") or ORDER_DESC) != ORDER_DESC:
        return ResponseMode.PAGINATED
    return ResponseMode.LEGACY


def parse_query(params: Mapping[str, str | None]) -> ScholarshipQuery:
    """
    Normalize raw query-string values. Never raises: bad numbers fall back to
    the defaults.
    """
    return ScholarshipQuery(
        search=_text(params, "search"),
        country=_text(params, "country"),
        category=_text(params, "category"),
        sort_by=params.get("sortBy") or SORT_POST_DATE,
        sort_order=params.get("sortOrder") or ORDER_DESC,
        window=PageWindow(
            page=parse_positive_int(params.get("page"), DEFAULT_PAGE, MAX_PAGE),
            limit=parse_positive_int(params.get("limit"), DEFAULT_LIMIT, MAX_LIMIT),
        ),
        mode=select_mode(params),
    )


def build_filter(query: ScholarshipQuery) -> filters.Filter:
    terms: list[filters.Filter] = []
    if query.search:
        terms.append(filters.any_of(*(filters.Contains(f, query.search) for f in SEARCH_FIELDS)))
    if query.country:
        terms.append(filters.Contains(COUNTRY_FIELD, query.country))
    if query.category:
        terms.append(filters.Contains(CATEGORY_FIELD, query.category))
    return filters.all_of(*terms)


def applied_sort_by(query: ScholarshipQuery) -> str:
    # Unknown sort keys fall back to post date rather than erroring.
    return query.sort_by if query.sort_by in SORT_FIELDS else SORT_POST_DATE


def applied_sort_order(query: ScholarshipQuery) -> str:
    return ORDER_ASC if query.sort_order == ORDER_ASC else ORDER_DESC


def build_sort(query: ScholarshipQuery) -> filters.Sort:
    return filters.Sort(
        field=SORT_FIELDS[applied_sort_by(query)],
        descending=applied_sort_order(query) == ORDER_DESC,
    )


def applied_filters(query: ScholarshipQuery) -> dict:
    return {
        "search": query.search,
        "country": query.country,
        "category": query.category,
        "sortBy": applied_sort_by(query),
        "sortOrder": applied_sort_order(query),
    }
