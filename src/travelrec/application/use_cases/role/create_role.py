"""Create role use case."""

import logging
from uuid import uuid4

from travelrec.application.dto.access_dto import RoleInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import Role
from travelrec.domain.exceptions import Conflict, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a role from existing permissions. Actor must hold user:assignRoles."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, data: RoleInput) -> Role:
        if not await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES):
            raise PermissionDenied("You do not have permission to manage roles!")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(data.name):
                raise Conflict("Role with this name already exists!")

            permission_ids = list(dict.fromkeys(data.permission_ids))
            found = await uow.permissions.list_by_ids(permission_ids)
            missing = set(permission_ids) - {p.id for p in found}
            if missing:
                raise NotFound("Permission", str(sorted(missing, key=str)[0]))

            role = Role(id=uuid4(), name=data.name, permission_ids=permission_ids)
            await uow.roles.create(role)

        logger.info("Role %s created by %s", role.name, actor_id)
        return role
