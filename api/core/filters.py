"""
Store-independent filter expressions.

Services build a small tree out of these nodes; each store adapter compiles it
to whatever query language it speaks. `to_mongo` covers MongoDB.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from bson import ObjectId


@dataclass(frozen=True)
class MatchAll:
    pass


@dataclass(frozen=True)
class Contains:
    """
    Case-insensitive, unanchored substring match on a text field.
    """

    field: str
    text: str


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any


@dataclass(frozen=True)
class NotEquals:
    field: str
    value: Any


@dataclass(frozen=True)
class And:
    filters: tuple["Filter", ...]


@dataclass(frozen=True)
class Or:
    filters: tuple["Filter", ...]


Filter = Union[MatchAll, Contains, Equals, NotEquals, And, Or]


@dataclass(frozen=True)
class Sort:
    field: str
    descending: bool = True


def all_of(*filters: Filter) -> Filter:
    """
    AND the given filters together, dropping MatchAll terms.
    """
    terms = tuple(f for f in filters if not isinstance(f, MatchAll))
    if not terms:
        return MatchAll()
    if len(terms) == 1:
        return terms[0]
    return And(terms)


def any_of(*filters: Filter) -> Filter:
    if any(isinstance(f, MatchAll) for f in filters):
        return MatchAll()
    if len(filters) == 1:
        return filters[0]
    return Or(tuple(filters))


def _mongo_value(field: str, value: Any) -> Any:
    # Ids travel as strings outside the store.
    if field == "_id" and isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def to_mongo(node: Filter) -> dict[str, Any]:
    if isinstance(node, MatchAll):
        return {}
    if isinstance(node, Contains):
        # User text is a literal substring, not a pattern.
        return {node.field: {"$regex": re.escape(node.text), "$options": "i"}}
    if isinstance(node, Equals):
        return {node.field: _mongo_value(node.field, node.value)}
    if isinstance(node, NotEquals):
        return {node.field: {"$ne": _mongo_value(node.field, node.value)}}
    if isinstance(node, And):
        return {"$and": [to_mongo(f) for f in node.filters]}
    if isinstance(node, Or):
        return {"$or": [to_mongo(f) for f in node.filters]}
    raise TypeError(f"Unsupported filter node: {node!r}")


def sort_to_mongo(sort: Sort) -> list[tuple[str, int]]:
    return [(sort.field, -1 if sort.descending else 1)]
