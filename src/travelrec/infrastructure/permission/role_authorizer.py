"""Authorizer implementation - resolves user -> role -> permission names."""

import logging
from uuid import UUID

from travelrec.domain.exceptions import DanglingReference, NotFound
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class RoleAuthorizer:
    """Checks a permission against the permission set of the user's role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_allowed(self, user_id: str, permission: PermissionName) -> bool:
        """Return True if the user's role carries the permission.

        Raises NotFound when the user does not exist and DanglingReference
        when the user's role has been removed underneath it.
        """
        try:
            uid = UUID(str(user_id))
        except ValueError:
            raise NotFound("User", str(user_id)) from None

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(uid)
            if not user:
                raise NotFound("User", str(user_id))

            role = await uow.roles.get_by_id(user.role_id)
            if not role:
                raise DanglingReference(
                    f"User {user_id} references missing role {user.role_id}"
                )

            names = set(await uow.roles.get_permission_names(role.id))

        allowed = permission.value in names
        if not allowed:
            logger.info("Denied %s to user %s (role %s)", permission.value, user_id, role.name)
        return allowed
