"""Create permission use case."""

from uuid import uuid4

from travelrec.application.dto.access_dto import PermissionInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import Permission
from travelrec.domain.exceptions import Conflict, PermissionDenied, ValidationError
from travelrec.domain.value_objects import PermissionName


class CreatePermissionUseCase:
    """Register one of the known permission names."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, data: PermissionInput) -> Permission:
        """Create permission. Name must be a PermissionName value."""
        if data.name not in {p.value for p in PermissionName}:
            raise ValidationError(f"Unknown permission name: {data.name}")
        if not await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES):
            raise PermissionDenied("You do not have permission to manage permissions!")

        async with self._uow_factory() as uow:
            if await uow.permissions.get_by_name(data.name):
                raise Conflict("Permission with this name already exists!")
            permission = Permission(id=uuid4(), name=data.name, description=data.description)
            await uow.permissions.create(permission)
            return permission
