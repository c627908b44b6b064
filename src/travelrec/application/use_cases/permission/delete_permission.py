"""Delete permission use case."""

from uuid import UUID

from travelrec.application.ports import Authorizer
from travelrec.domain.exceptions import IntegrityError, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName


class DeletePermissionUseCase:
    """Delete a permission that no role references."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, permission_id: UUID) -> None:
        if not await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES):
            raise PermissionDenied("You do not have permission to manage permissions!")

        async with self._uow_factory() as uow:
            if not await uow.permissions.get_by_id(permission_id):
                raise NotFound("Permission", str(permission_id))
            if await uow.roles.exists_with_permission(permission_id):
                raise IntegrityError(
                    "Cannot delete the permission. It is assigned to at least one role."
                )
            await uow.permissions.delete(permission_id)
