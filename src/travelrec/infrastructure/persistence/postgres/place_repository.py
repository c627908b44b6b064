"""PostgreSQL place repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Place
from travelrec.domain.value_objects import Location
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = (
    "SELECT id, name, description, location, created_by, images, tags, upvotes, approved "
    "FROM place"
)

_COLUMNS = {
    "id": "id",
    "name": "name",
    "description": "description",
    "location.continent": "location->>'continent'",
    "location.country": "location->>'country'",
    "location.city": "location->>'city'",
    "upvotes": "upvotes",
    "approved": "approved",
    "created_by": "created_by",
}


def _row_to_place(r) -> Place:
    loc = r[3] or {}
    return Place(
        id=r[0],
        name=r[1],
        description=r[2],
        location=Location(
            continent=loc.get("continent", ""),
            country=loc.get("country", ""),
            city=loc.get("city", ""),
            street=loc.get("street", ""),
            street_number=loc.get("streetNumber", ""),
        ),
        created_by=r[4],
        images=list(r[5] or []),
        tags=list(r[6] or []),
        upvotes=r[7],
        approved=r[8],
    )


def _location_json(location: Location) -> Jsonb:
    return Jsonb(
        {
            "continent": location.continent,
            "country": location.country,
            "city": location.city,
            "street": location.street,
            "streetNumber": location.street_number,
        }
    )


class PostgresPlaceRepository:
    """Place repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, place_id: UUID) -> Place | None:
        """Get place by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE id = %s", (place_id,))
        r = await cur.fetchone()
        return _row_to_place(r) if r else None

    async def get_by_name(self, name: str, city: str, country: str) -> Place | None:
        """Get place by name within city and country, ignoring case."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE lower(name) = lower(%s) "
            "AND lower(location->>'city') = lower(%s) "
            "AND lower(location->>'country') = lower(%s)",
            (name.strip(), city.strip(), country.strip()),
        )
        r = await cur.fetchone()
        return _row_to_place(r) if r else None

    async def list_all(self) -> list[Place]:
        """List all places."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY name")
        return [_row_to_place(r) for r in await cur.fetchall()]

    async def list_by_ids(self, place_ids: list[UUID]) -> list[Place]:
        """List places with the given ids."""
        if not place_ids:
            return []
        cur = await self._conn.execute(f"{_SELECT} WHERE id = ANY(%s)", (list(place_ids),))
        return [_row_to_place(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[Place]:
        """List places matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(f"{_SELECT} WHERE {condition} ORDER BY name", params)
        return [_row_to_place(r) for r in await cur.fetchall()]

    async def create(self, place: Place) -> Place:
        """Create place."""
        await self._conn.execute(
            "INSERT INTO place (id, name, description, location, created_by, images, tags, "
            "upvotes, approved) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                place.id,
                place.name,
                place.description,
                _location_json(place.location),
                place.created_by,
                place.images,
                place.tags,
                place.upvotes,
                place.approved,
            ),
        )
        return place

    async def update(self, place: Place) -> None:
        """Update place. created_by is never changed."""
        await self._conn.execute(
            "UPDATE place SET name=%s, description=%s, location=%s, images=%s, tags=%s, "
            "upvotes=%s, approved=%s WHERE id=%s",
            (
                place.name,
                place.description,
                _location_json(place.location),
                place.images,
                place.tags,
                place.upvotes,
                place.approved,
                place.id,
            ),
        )

    async def delete(self, place_id: UUID) -> None:
        """Delete place."""
        await self._conn.execute("DELETE FROM place WHERE id = %s", (place_id,))
