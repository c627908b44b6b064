"""PostgreSQL city and country image gallery repositories."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import CityImages, CountryImages
from travelrec.domain.value_objects import Image
from travelrec.infrastructure.persistence.postgres.filters import build_condition


def _images_json(images: list[Image]) -> Jsonb:
    return Jsonb([{"url": i.url, "alt": i.alt} for i in images])


def _images(raw) -> list[Image]:
    return [Image(url=i["url"], alt=i["alt"]) for i in (raw or [])]


class PostgresCityImagesRepository:
    """City gallery repository implementation."""

    _SELECT = "SELECT id, name, country, images FROM city_images"
    _COLUMNS = {"id": "id", "name": "name", "country": "country"}

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r) -> CityImages:
        return CityImages(id=r[0], name=r[1], country=r[2], images=_images(r[3]))

    async def get_by_id(self, city_id: UUID) -> CityImages | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (city_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def get_by_name(self, name: str, country: str) -> CityImages | None:
        """Get city by name within country, ignoring case."""
        cur = await self._conn.execute(
            f"{self._SELECT} WHERE lower(name) = lower(%s) AND lower(country) = lower(%s)",
            (name.strip(), country.strip()),
        )
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list_all(self) -> list[CityImages]:
        cur = await self._conn.execute(f"{self._SELECT} ORDER BY country, name")
        return [self._row(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[CityImages]:
        condition, params = build_condition(query, self._COLUMNS)
        cur = await self._conn.execute(
            f"{self._SELECT} WHERE {condition} ORDER BY country, name", params
        )
        return [self._row(r) for r in await cur.fetchall()]

    async def create(self, city: CityImages) -> CityImages:
        await self._conn.execute(
            "INSERT INTO city_images (id, name, country, images) VALUES (%s, %s, %s, %s)",
            (city.id, city.name, city.country, _images_json(city.images)),
        )
        return city

    async def update(self, city: CityImages) -> None:
        await self._conn.execute(
            "UPDATE city_images SET name=%s, country=%s, images=%s WHERE id=%s",
            (city.name, city.country, _images_json(city.images), city.id),
        )

    async def delete(self, city_id: UUID) -> None:
        await self._conn.execute("DELETE FROM city_images WHERE id = %s", (city_id,))


class PostgresCountryImagesRepository:
    """Country gallery repository implementation."""

    _SELECT = "SELECT id, name, images FROM country_images"
    _COLUMNS = {"id": "id", "name": "name"}

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r) -> CountryImages:
        return CountryImages(id=r[0], name=r[1], images=_images(r[2]))

    async def get_by_id(self, country_id: UUID) -> CountryImages | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (country_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def get_by_name(self, name: str) -> CountryImages | None:
        """Get country by name, ignoring case."""
        cur = await self._conn.execute(
            f"{self._SELECT} WHERE lower(name) = lower(%s)", (name.strip(),)
        )
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list_all(self) -> list[CountryImages]:
        cur = await self._conn.execute(f"{self._SELECT} ORDER BY name")
        return [self._row(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[CountryImages]:
        condition, params = build_condition(query, self._COLUMNS)
        cur = await self._conn.execute(f"{self._SELECT} WHERE {condition} ORDER BY name", params)
        return [self._row(r) for r in await cur.fetchall()]

    async def create(self, country: CountryImages) -> CountryImages:
        await self._conn.execute(
            "INSERT INTO country_images (id, name, images) VALUES (%s, %s, %s)",
            (country.id, country.name, _images_json(country.images)),
        )
        return country

    async def update(self, country: CountryImages) -> None:
        await self._conn.execute(
            "UPDATE country_images SET name=%s, images=%s WHERE id=%s",
            (country.name, _images_json(country.images), country.id),
        )

    async def delete(self, country_id: UUID) -> None:
        await self._conn.execute("DELETE FROM country_images WHERE id = %s", (country_id,))
