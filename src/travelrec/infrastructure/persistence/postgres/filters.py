"""Translate FieldQuery filters into SQL conditions."""

from collections.abc import Mapping
from datetime import UTC, datetime, time, timedelta

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.value_objects import MatchStrategy


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_condition(
    query: FieldQuery, columns: Mapping[str, str]
) -> tuple[str, list[object]]:
    """Build a WHERE condition and params for query.

    columns maps entity attribute -> SQL expression. MEMBER expressions carry
    their own %s placeholder (usually an IN subquery on a link table).
    """
    expr = columns[query.attribute]
    strategy = query.strategy
    if strategy == MatchStrategy.MEMBER:
        return expr, [query.value]
    if strategy == MatchStrategy.TEXT:
        return f"{expr} ILIKE %s", [f"%{_escape_like(str(query.value))}%"]
    if strategy == MatchStrategy.DATE:
        start = datetime.combine(query.value, time.min, tzinfo=UTC)
        return f"{expr} >= %s AND {expr} < %s", [start, start + timedelta(days=1)]
    return f"{expr} = %s", [query.value]
