"""Update role use case."""

from uuid import UUID

from travelrec.application.dto.access_dto import RoleInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import Role
from travelrec.domain.exceptions import Conflict, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName


class UpdateRoleUseCase:
    """Rename a role and replace its permission set."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, role_id: UUID, data: RoleInput) -> Role:
        if not await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES):
            raise PermissionDenied("You do not have permission to manage roles!")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))

            existing = await uow.roles.get_by_name(data.name)
            if existing and existing.id != role_id:
                raise Conflict("Role with this name already exists!")

            permission_ids = list(dict.fromkeys(data.permission_ids))
            found = await uow.permissions.list_by_ids(permission_ids)
            missing = set(permission_ids) - {p.id for p in found}
            if missing:
                raise NotFound("Permission", str(sorted(missing, key=str)[0]))

            role.name = data.name
            role.permission_ids = permission_ids
            await uow.roles.update(role)
            return role
