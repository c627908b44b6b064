"""PostgreSQL collection repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Collection
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = (
    "SELECT c.id, c.created_by, c.name, c.visible, "
    "COALESCE(array_agg(cp.place_id ORDER BY cp.position) "
    "FILTER (WHERE cp.place_id IS NOT NULL), '{}') "
    "FROM collection c LEFT JOIN collection_place cp ON cp.collection_id = c.id"
)
_GROUP = " GROUP BY c.id, c.created_by, c.name, c.visible ORDER BY c.name"

_COLUMNS = {
    "id": "c.id",
    "created_by": "c.created_by",
    "name": "c.name",
    "visible": "c.visible",
    "place_ids": (
        "c.id IN (SELECT collection_id FROM collection_place WHERE place_id = %s)"
    ),
}


def _row_to_collection(r) -> Collection:
    return Collection(
        id=r[0], created_by=r[1], name=r[2], visible=r[3], place_ids=list(r[4])
    )


class PostgresCollectionRepository:
    """Collection repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, collection_id: UUID) -> Collection | None:
        """Get collection by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE c.id = %s{_GROUP}", (collection_id,))
        r = await cur.fetchone()
        return _row_to_collection(r) if r else None

    async def list_all(self) -> list[Collection]:
        """List all collections."""
        cur = await self._conn.execute(f"{_SELECT}{_GROUP}")
        return [_row_to_collection(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[Collection]:
        """List collections matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(f"{_SELECT} WHERE {condition}{_GROUP}", params)
        return [_row_to_collection(r) for r in await cur.fetchall()]

    async def _replace_places(self, collection: Collection) -> None:
        await self._conn.execute(
            "DELETE FROM collection_place WHERE collection_id = %s", (collection.id,)
        )
        for position, place_id in enumerate(collection.place_ids):
            await self._conn.execute(
                "INSERT INTO collection_place (collection_id, place_id, position) "
                "VALUES (%s, %s, %s)",
                (collection.id, place_id, position),
            )

    async def create(self, collection: Collection) -> Collection:
        """Create collection with its places."""
        await self._conn.execute(
            "INSERT INTO collection (id, created_by, name, visible) VALUES (%s, %s, %s, %s)",
            (collection.id, collection.created_by, collection.name, collection.visible),
        )
        await self._replace_places(collection)
        return collection

    async def update(self, collection: Collection) -> None:
        """Update collection. created_by is never changed."""
        await self._conn.execute(
            "UPDATE collection SET name=%s, visible=%s WHERE id=%s",
            (collection.name, collection.visible, collection.id),
        )
        await self._replace_places(collection)

    async def delete(self, collection_id: UUID) -> None:
        """Delete collection (place links cascade)."""
        await self._conn.execute("DELETE FROM collection WHERE id = %s", (collection_id,))

    async def remove_place(self, place_id: UUID) -> None:
        """Drop a place from every collection."""
        await self._conn.execute(
            "DELETE FROM collection_place WHERE place_id = %s", (place_id,)
        )
