"""Update collection use case."""

from uuid import UUID

from travelrec.application.dto.content_dto import CollectionInput
from travelrec.application.use_cases.collection.create_collection import _check_places
from travelrec.domain.entities import Collection
from travelrec.domain.exceptions import NotFound, PermissionDenied


class UpdateCollectionUseCase:
    """Rename a collection, replace its places or toggle visibility."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor_id: str, collection_id: UUID, data: CollectionInput
    ) -> Collection:
        async with self._uow_factory() as uow:
            collection = await uow.collections.get_by_id(collection_id)
            if not collection:
                raise NotFound("Collection", str(collection_id))
            if str(collection.created_by) != str(actor_id):
                raise PermissionDenied("You can only edit your own collections!")

            collection.place_ids = await _check_places(uow, data.place_ids)
            collection.name = data.name
            collection.visible = data.visible
            await uow.collections.update(collection)
            return collection
