"""Delete recommendation use case."""

from uuid import UUID

from travelrec.domain.exceptions import NotFound, PermissionDenied


class DeleteRecommendationUseCase:
    """Delete a recommendation written by the actor."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, recommendation_id: UUID) -> None:
        async with self._uow_factory() as uow:
            recommendation = await uow.recommendations.get_by_id(recommendation_id)
            if not recommendation:
                raise NotFound("Recommendation", str(recommendation_id))
            if str(recommendation.created_by) != str(actor_id):
                raise PermissionDenied("You can only delete your own recommendations!")
            await uow.recommendations.delete(recommendation_id)
