"""PostgreSQL recommendation repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Recommendation
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = (
    "SELECT id, created_by, place_id, title, content, date_of_visit, date_of_writing, "
    "rating, upvotes FROM recommendation"
)

_COLUMNS = {
    "id": "id",
    "created_by": "created_by",
    "place_id": "place_id",
    "title": "title",
    "content": "content",
    "rating": "rating",
    "upvotes": "upvotes",
    "date_of_visit": "date_of_visit",
    "date_of_writing": "date_of_writing",
}


def _row_to_recommendation(r) -> Recommendation:
    return Recommendation(
        id=r[0],
        created_by=r[1],
        place_id=r[2],
        title=r[3],
        content=r[4],
        date_of_visit=r[5],
        date_of_writing=r[6],
        rating=r[7],
        upvotes=r[8],
    )


class PostgresRecommendationRepository:
    """Recommendation repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, recommendation_id: UUID) -> Recommendation | None:
        """Get recommendation by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE id = %s", (recommendation_id,))
        r = await cur.fetchone()
        return _row_to_recommendation(r) if r else None

    async def list_all(self) -> list[Recommendation]:
        """List all recommendations, newest first."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY date_of_writing DESC")
        return [_row_to_recommendation(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[Recommendation]:
        """List recommendations matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(
            f"{_SELECT} WHERE {condition} ORDER BY date_of_writing DESC", params
        )
        return [_row_to_recommendation(r) for r in await cur.fetchall()]

    async def create(self, recommendation: Recommendation) -> Recommendation:
        """Create recommendation."""
        await self._conn.execute(
            "INSERT INTO recommendation (id, created_by, place_id, title, content, "
            "date_of_visit, date_of_writing, rating, upvotes) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                recommendation.id,
                recommendation.created_by,
                recommendation.place_id,
                recommendation.title,
                recommendation.content,
                recommendation.date_of_visit,
                recommendation.date_of_writing,
                recommendation.rating,
                recommendation.upvotes,
            ),
        )
        return recommendation

    async def update(self, recommendation: Recommendation) -> None:
        """Update recommendation. Author, place and date of writing are fixed."""
        await self._conn.execute(
            "UPDATE recommendation SET title=%s, content=%s, date_of_visit=%s, rating=%s, "
            "upvotes=%s WHERE id=%s",
            (
                recommendation.title,
                recommendation.content,
                recommendation.date_of_visit,
                recommendation.rating,
                recommendation.upvotes,
                recommendation.id,
            ),
        )

    async def delete(self, recommendation_id: UUID) -> None:
        """Delete recommendation."""
        await self._conn.execute(
            "DELETE FROM recommendation WHERE id = %s", (recommendation_id,)
        )

    async def delete_by_place(self, place_id: UUID) -> int:
        """Delete all recommendations of a place, return how many."""
        cur = await self._conn.execute(
            "DELETE FROM recommendation WHERE place_id = %s", (place_id,)
        )
        return cur.rowcount
