"""
Page-number pagination shared by list endpoints.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Keeps skip and limit well inside the store's 8-byte integers.
MAX_PAGE = 1_000_000
MAX_LIMIT = 1_000_000


def parse_positive_int(raw: str | None, default: int, maximum: int | None = None) -> int:
    """
    Parse a query-string number. Missing, non-numeric, non-positive and
    out-of-range values give `default` instead of an error.
    """
    text = (raw or "").strip()
    if not text:
        return default
    try:
        value = int(text)
    except ValueError:
        return default
    if value <= 0 or (maximum is not None and value > maximum):
        return default
    return value


@dataclass(frozen=True)
class PageWindow:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def metadata(self, total: int) -> dict:
        return {
            "total": total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": math.ceil(total / self.limit),
            "hasMore": self.page * self.limit < total,
        }
