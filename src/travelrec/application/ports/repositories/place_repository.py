"""Place repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Place


class PlaceRepository(Protocol):
    """Port for place persistence."""

    async def get_by_id(self, place_id: UUID) -> Place | None: ...

    async def get_by_name(self, name: str, city: str, country: str) -> Place | None: ...

    async def list_all(self) -> list[Place]: ...

    async def list_by_ids(self, place_ids: list[UUID]) -> list[Place]: ...

    async def find(self, query: FieldQuery) -> list[Place]: ...

    async def create(self, place: Place) -> Place: ...

    async def update(self, place: Place) -> None: ...

    async def delete(self, place_id: UUID) -> None: ...
