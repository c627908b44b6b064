"""Country images repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import CountryImages


class CountryImagesRepository(Protocol):
    """Port for country image gallery persistence."""

    async def get_by_id(self, country_id: UUID) -> CountryImages | None: ...

    async def get_by_name(self, name: str) -> CountryImages | None: ...

    async def list_all(self) -> list[CountryImages]: ...

    async def find(self, query: FieldQuery) -> list[CountryImages]: ...

    async def create(self, country: CountryImages) -> CountryImages: ...

    async def update(self, country: CountryImages) -> None: ...

    async def delete(self, country_id: UUID) -> None: ...
