"""Update recommendation use case."""

from uuid import UUID

from travelrec.application.dto.content_dto import RecommendationInput
from travelrec.domain.entities import Recommendation
from travelrec.domain.exceptions import NotFound, PermissionDenied


class UpdateRecommendationUseCase:
    """Edit a recommendation. Author, place and date of writing are fixed."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor_id: str, recommendation_id: UUID, data: RecommendationInput
    ) -> Recommendation:
        async with self._uow_factory() as uow:
            recommendation = await uow.recommendations.get_by_id(recommendation_id)
            if not recommendation:
                raise NotFound("Recommendation", str(recommendation_id))
            if str(recommendation.created_by) != str(actor_id):
                raise PermissionDenied("You can only edit your own recommendations!")

            recommendation.title = data.title
            recommendation.content = data.content
            recommendation.date_of_visit = data.date_of_visit
            recommendation.rating = data.rating
            recommendation.upvotes = data.upvotes
            await uow.recommendations.update(recommendation)
            return recommendation
