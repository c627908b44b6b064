"""Create place use case."""

import logging
from uuid import UUID, uuid4

from travelrec.application.dto.place_dto import PlaceInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import Place
from travelrec.domain.exceptions import Conflict
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class CreatePlaceUseCase:
    """Create a place owned by the actor.

    Without content:managePlaces the privileged fields are dropped: the place
    starts unapproved with zero upvotes whatever the input says.
    """

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, data: PlaceInput) -> Place:
        can_manage = await self._authorizer.is_allowed(actor_id, PermissionName.MANAGE_PLACES)

        async with self._uow_factory() as uow:
            existing = await uow.places.get_by_name(
                data.name, data.location.city, data.location.country
            )
            if existing:
                raise Conflict("Place with this name already exists in this city!")

            place = Place(
                id=uuid4(),
                name=data.name,
                description=data.description,
                location=data.location,
                created_by=UUID(str(actor_id)),
                images=list(data.images),
                tags=list(data.tags),
                upvotes=(data.upvotes or 0) if can_manage else 0,
                approved=bool(data.approved) if can_manage else False,
            )
            await uow.places.create(place)

        logger.info("Place %s created by %s (approved=%s)", place.id, actor_id, place.approved)
        return place
