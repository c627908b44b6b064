"""Delete place use case."""

import logging
from uuid import UUID

from travelrec.application.ports import Authorizer
from travelrec.domain.exceptions import NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class DeletePlaceUseCase:
    """Delete a place with its recommendations and collection entries."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, place_id: UUID) -> int:
        """Delete place; returns the number of recommendations removed with it."""
        can_manage = await self._authorizer.is_allowed(actor_id, PermissionName.MANAGE_PLACES)

        async with self._uow_factory() as uow:
            place = await uow.places.get_by_id(place_id)
            if not place:
                raise NotFound("Place", str(place_id))
            if not can_manage and str(place.created_by) != str(actor_id):
                raise PermissionDenied("You can only delete places you created!")

            removed = await uow.recommendations.delete_by_place(place_id)
            await uow.collections.remove_place(place_id)
            await uow.places.delete(place_id)

        logger.info("Place %s deleted by %s with %d recommendations", place_id, actor_id, removed)
        return removed
