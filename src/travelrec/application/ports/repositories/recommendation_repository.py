"""Recommendation repository port."""

from typing import Protocol
from uuid import UUID

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import Recommendation


class RecommendationRepository(Protocol):
    """Port for recommendation persistence."""

    async def get_by_id(self, recommendation_id: UUID) -> Recommendation | None: ...

    async def list_all(self) -> list[Recommendation]: ...

    async def find(self, query: FieldQuery) -> list[Recommendation]: ...

    async def create(self, recommendation: Recommendation) -> Recommendation: ...

    async def update(self, recommendation: Recommendation) -> None: ...

    async def delete(self, recommendation_id: UUID) -> None: ...

    async def delete_by_place(self, place_id: UUID) -> int: ...
