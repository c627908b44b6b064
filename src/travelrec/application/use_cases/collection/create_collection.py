"""Create collection use case."""

from uuid import UUID, uuid4

from travelrec.application.dto.content_dto import CollectionInput
from travelrec.domain.entities import Collection
from travelrec.domain.exceptions import NotFound


async def _check_places(uow, place_ids: list[UUID]) -> list[UUID]:
    """Deduplicate place ids and make sure every one exists."""
    unique = list(dict.fromkeys(place_ids))
    found = {p.id for p in await uow.places.list_by_ids(unique)}
    for place_id in unique:
        if place_id not in found:
            raise NotFound("Place", str(place_id))
    return unique


class CreateCollectionUseCase:
    """Create a collection of places owned by the actor."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, data: CollectionInput) -> Collection:
        async with self._uow_factory() as uow:
            place_ids = await _check_places(uow, data.place_ids)
            collection = Collection(
                id=uuid4(),
                created_by=UUID(str(actor_id)),
                name=data.name,
                place_ids=place_ids,
                visible=data.visible,
            )
            await uow.collections.create(collection)
            return collection
