"""Collection repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Collection


class CollectionRepository(Protocol):
    """Port for collection persistence."""

    async def get_by_id(self, collection_id: UUID) -> Collection | None: ...

    async def list_all(self) -> list[Collection]: ...

    async def find(self, query: FieldQuery) -> list[Collection]: ...

    async def create(self, collection: Collection) -> Collection: ...

    async def update(self, collection: Collection) -> None: ...

    async def delete(self, collection_id: UUID) -> None: ...

    async def remove_place(self, place_id: UUID) -> None: ...
