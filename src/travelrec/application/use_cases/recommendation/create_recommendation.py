"""Create recommendation use case."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from travelrec.application.dto.content_dto import RecommendationInput
from travelrec.domain.entities import Recommendation
from travelrec.domain.exceptions import NotFound


class CreateRecommendationUseCase:
    """Write a recommendation for an existing place."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, data: RecommendationInput) -> Recommendation:
        async with self._uow_factory() as uow:
            if not await uow.places.get_by_id(data.place_id):
                raise NotFound("Place", str(data.place_id))

            recommendation = Recommendation(
                id=uuid4(),
                created_by=UUID(str(actor_id)),
                place_id=data.place_id,
                title=data.title,
                content=data.content,
                date_of_visit=data.date_of_visit,
                date_of_writing=datetime.now(UTC),
                rating=data.rating,
                upvotes=data.upvotes,
            )
            await uow.recommendations.create(recommendation)
            return recommendation
