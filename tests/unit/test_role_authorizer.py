"""Unit tests for RoleAuthorizer."""

from uuid import uuid4

import pytest

from travelrec.domain.entities import Role
from travelrec.domain.exceptions import DanglingReference, NotFound
from travelrec.domain.value_objects import PermissionName
from travelrec.infrastructure.permission.role_authorizer import RoleAuthorizer

from tests.conftest import make_user


@pytest.mark.asyncio
async def test_admin_holds_both_permissions(world) -> None:
    authorizer = RoleAuthorizer(world.factory)
    admin_id = str(world.admin.id)
    assert await authorizer.is_allowed(admin_id, PermissionName.ASSIGN_ROLES) is True
    assert await authorizer.is_allowed(admin_id, PermissionName.MANAGE_PLACES) is True


@pytest.mark.asyncio
async def test_editor_manages_places_but_cannot_assign_roles(world) -> None:
    authorizer = RoleAuthorizer(world.factory)
    editor_id = str(world.editor.id)
    assert await authorizer.is_allowed(editor_id, PermissionName.MANAGE_PLACES) is True
    assert await authorizer.is_allowed(editor_id, PermissionName.ASSIGN_ROLES) is False


@pytest.mark.asyncio
async def test_role_without_permissions_is_denied(world) -> None:
    authorizer = RoleAuthorizer(world.factory)
    for permission in PermissionName:
        assert await authorizer.is_allowed(str(world.member.id), permission) is False


@pytest.mark.asyncio
async def test_role_name_alone_grants_nothing(world) -> None:
    """A role called admin without permissions is not treated as admin."""
    fake_admin_role = world.uow.roles.add(Role(id=uuid4(), name="Admin2"))
    impostor = world.uow.users.add(make_user(fake_admin_role.id, "impostor"))
    authorizer = RoleAuthorizer(world.factory)
    assert await authorizer.is_allowed(str(impostor.id), PermissionName.ASSIGN_ROLES) is False


@pytest.mark.asyncio
async def test_unknown_user_raises_not_found(world) -> None:
    authorizer = RoleAuthorizer(world.factory)
    with pytest.raises(NotFound):
        await authorizer.is_allowed(str(uuid4()), PermissionName.MANAGE_PLACES)


@pytest.mark.asyncio
async def test_malformed_user_id_raises_not_found(world) -> None:
    authorizer = RoleAuthorizer(world.factory)
    with pytest.raises(NotFound):
        await authorizer.is_allowed("not-a-uuid", PermissionName.MANAGE_PLACES)


@pytest.mark.asyncio
async def test_missing_role_is_a_data_integrity_failure(world) -> None:
    orphan = world.uow.users.add(make_user(uuid4(), "orphan"))
    authorizer = RoleAuthorizer(world.factory)
    with pytest.raises(DanglingReference):
        await authorizer.is_allowed(str(orphan.id), PermissionName.MANAGE_PLACES)


@pytest.mark.asyncio
async def test_membership_follows_role_changes(world) -> None:
    """Granting a permission to the role takes effect on the next check."""
    authorizer = RoleAuthorizer(world.factory)
    member_id = str(world.member.id)
    assert await authorizer.is_allowed(member_id, PermissionName.MANAGE_PLACES) is False

    role = await world.uow.roles.get_by_id(world.user_role.id)
    role.permission_ids.append(world.manage_places.id)
    await world.uow.roles.update(role)

    assert await authorizer.is_allowed(member_id, PermissionName.MANAGE_PLACES) is True
