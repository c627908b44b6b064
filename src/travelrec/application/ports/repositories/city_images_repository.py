"""City images repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import CityImages


class CityImagesRepository(Protocol):
    """Port for city image gallery persistence."""

    async def get_by_id(self, city_id: UUID) -> CityImages | None: ...

    async def get_by_name(self, name: str, country: str) -> CityImages | None: ...

    async def list_all(self) -> list[CityImages]: ...

    async def find(self, query: FieldQuery) -> list[CityImages]: ...

    async def create(self, city: CityImages) -> CityImages: ...

    async def update(self, city: CityImages) -> None: ...

    async def delete(self, city_id: UUID) -> None: ...
