"""Comparison strategy for field queries."""

from enum import StrEnum


class MatchStrategy(StrEnum):
    """How a query value is compared against a stored field."""

    ID = "id"
    MEMBER = "member"
    TEXT = "text"
    BOOL = "bool"
    NUMBER = "number"
    DATE = "date"
