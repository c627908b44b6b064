"""Update user use case."""

import logging
from uuid import UUID

from travelrec.application.dto.user_dto import UserUpdateInput
from travelrec.application.ports import Authorizer
from travelrec.domain.entities import User
from travelrec.domain.exceptions import Conflict, NotFound, PermissionDenied
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Update a user's profile; changing the role needs user:assignRoles.

    Users edit only their own profile unless they hold user:assignRoles.
    Email, password hash and register date are never changed here.
    """

    def __init__(self, unit_of_work_factory: type, authorizer: Authorizer) -> None:
        self._uow_factory = unit_of_work_factory
        self._authorizer = authorizer

    async def execute(self, actor_id: str, user_id: UUID, data: UserUpdateInput) -> User:
        async with self._uow_factory() as uow:
            target = await uow.users.get_by_id(user_id)
            if not target:
                raise NotFound("User", str(user_id))
            role_changed = data.role_id is not None and data.role_id != target.role_id

        other_user = actor_id != str(user_id)
        if role_changed or other_user:
            allowed = await self._authorizer.is_allowed(actor_id, PermissionName.ASSIGN_ROLES)
            if not allowed and role_changed:
                raise PermissionDenied("You do not have permission to update the user role!")
            if not allowed:
                raise PermissionDenied("You can only update your own profile!")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))

            taken = await uow.users.get_by_username(data.username)
            if taken and taken.id != user.id:
                raise Conflict("Username already taken!")

            if role_changed:
                role = await uow.roles.get_by_id(data.role_id)
                if not role:
                    raise NotFound("Role", str(data.role_id))
                user.role_id = role.id

            user.first_name = data.first_name
            user.last_name = data.last_name
            user.username = data.username
            user.profile_picture = data.profile_picture
            user.bio = data.bio
            user.country = data.country
            user.city = data.city
            user.socials = list(data.socials)
            await uow.users.update(user)

        if role_changed:
            logger.info("User %s assigned role %s by %s", user_id, data.role_id, actor_id)
        return user
