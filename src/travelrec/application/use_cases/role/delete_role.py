"""Delete role use case."""

import logging
from uuid import UUID

from travelrec.application.ports import Authorizer
from travelrec.domain.exceptions import IntegrityError, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role that no user references."""

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, role_id: UUID) -> None:
        if not await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES):
            raise PermissionDenied("You do not have permission to manage roles!")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", str(role_id))
            if await uow.users.exists_with_role(role_id):
                raise IntegrityError(
                    "Cannot delete the role. It is assigned to at least one user."
                )
            await uow.roles.delete(role_id)

        logger.info("Role %s deleted by %s", role.name, actor_id)
