"""Delete collection use case."""

from uuid import UUID

from travelrec.domain.exceptions import NotFound, PermissionDenied


class DeleteCollectionUseCase:
    """Delete a collection owned by the actor."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, collection_id: UUID) -> None:
        async with self._uow_factory() as uow:
            collection = await uow.collections.get_by_id(collection_id)
            if not collection:
                raise NotFound("Collection", str(collection_id))
            if str(collection.created_by) != str(actor_id):
                raise PermissionDenied("You can only delete your own collections!")
            await uow.collections.delete(collection_id)
