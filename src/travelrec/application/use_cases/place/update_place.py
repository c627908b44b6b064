"""Update place use case."""

from uuid import UUID

from travelrec.application.dto.place_dto import PlaceInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import Place
from travelrec.domain.exceptions import Conflict, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName


class UpdatePlaceUseCase:
    """Update a place. Only its creator or a place manager may edit it.

    upvotes and approved are applied only for place managers; for anyone else
    the stored values are kept.
    """

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, place_id: UUID, data: PlaceInput) -> Place:
        can_manage = await self._authorizer.is_allowed(actor_id, PermissionName.MANAGE_PLACES)

        async with self._uow_factory() as uow:
            place = await uow.places.get_by_id(place_id)
            if not place:
                raise NotFound("Place", str(place_id))
            if not can_manage and str(place.created_by) != str(actor_id):
                raise PermissionDenied("You can only edit places you created!")

            existing = await uow.places.get_by_name(
                data.name, data.location.city, data.location.country
            )
            if existing and existing.id != place_id:
                raise Conflict("Place with this name already exists in this city!")

            place.name = data.name
            place.description = data.description
            place.location = data.location
            place.images = list(data.images)
            place.tags = list(data.tags)
            if can_manage:
                if data.upvotes is not None:
                    place.upvotes = data.upvotes
                if data.approved is not None:
                    place.approved = data.approved
            await uow.places.update(place)
            return place
