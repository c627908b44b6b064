"""Seed use case - baseline permissions, roles and admin account."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from travelrec.application.ports import PasswordHasher
from travelrec.domain.entities import Permission, Role, User
from travelrec.domain.value_objects import PermissionName

logger = logging.getLogger(__name__)

PERMISSION_DESCRIPTIONS = {
    PermissionName.ASSIGN_ROLES: "Allows to assign roles to another user",
    PermissionName.MANAGE_PLACES: "Allows to approve or decline a suggested place",
}

ROLE_PERMISSIONS = {
    "admin": [PermissionName.ASSIGN_ROLES, PermissionName.MANAGE_PLACES],
    "editor": [PermissionName.MANAGE_PLACES],
    "user": [],
}


class SeedDataUseCase:
    """Wipe users, roles and permissions and insert the baseline set."""

    def __init__(self, unit_of_work_factory: type, password_hasher: PasswordHasher) -> None:
        self._uow_factory = unit_of_work_factory
        self._hasher = password_hasher

    async def execute(self, admin_email: str, admin_password: str) -> User:
        password_hash = await self._hasher.hash(admin_password)

        async with self._uow_factory() as uow:
            await uow.users.delete_all()
            await uow.roles.delete_all()
            await uow.permissions.delete_all()

            by_name: dict[PermissionName, Permission] = {}
            for name, description in PERMISSION_DESCRIPTIONS.items():
                by_name[name] = await uow.permissions.create(
                    Permission(id=uuid4(), name=name.value, description=description)
                )

            roles: dict[str, Role] = {}
            for role_name, names in ROLE_PERMISSIONS.items():
                roles[role_name] = await uow.roles.create(
                    Role(id=uuid4(), name=role_name, permission_ids=[by_name[n].id for n in names])
                )

            admin = User(
                id=uuid4(),
                first_name="admin",
                last_name="admin",
                username="admin",
                email=admin_email,
                password_hash=password_hash,
                role_id=roles["admin"].id,
                register_date=datetime.now(UTC),
            )
            await uow.users.create(admin)

        logger.info(
            "Seeded %d permissions, %d roles and admin %s", len(by_name), len(roles), admin_email
        )
        return admin
