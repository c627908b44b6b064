"""Role and permission resources."""

import falcon
import falcon.asgi

from travelrec.application.dto.field_query import PERMISSION_FIELDS, ROLE_FIELDS
from travelrec.application.use_cases.permission.create_permission import CreatePermissionUseCase
from travelrec.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from travelrec.application.use_cases.role.create_role import CreateRoleUseCase
from travelrec.application.use_cases.role.delete_role import DeleteRoleUseCase
from travelrec.application.use_cases.role.update_role import UpdateRoleUseCase
from travelrec.domain.entities import Role
from travelrec.interfaces.api.presenters import permission_to_dict, role_to_dict
from travelrec.interfaces.api.resources.common import (
    actor_id,
    done,
    field_query,
    ok,
    parse_id,
    read_body,
)
from travelrec.interfaces.api.schemas.access_schemas import PermissionRequest, RoleRequest
from travelrec.interfaces.api.schemas.common import parse_body


class RolesResource:
    """GET/POST /api/roles and GET /api/roles/query."""

    def __init__(self, create_role: CreateRoleUseCase, unit_of_work_factory: type) -> None:
        self._create_role = create_role
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
            ok(resp, await self._render(uow, req, roles))

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, ROLE_FIELDS)
        async with self._uow_factory() as uow:
            roles = await uow.roles.find(query)
            ok(resp, await self._render(uow, req, roles))

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(RoleRequest, await read_body(req))
        role = await self._create_role.execute(actor_id(req), body.to_input())
        ok(resp, role_to_dict(role), falcon.HTTP_201)

    async def _render(self, uow, req: falcon.asgi.Request, roles: list[Role]) -> list[dict]:
        if not req.get_param_as_bool("populate", default=False):
            return [role_to_dict(r) for r in roles]
        perms = {p.id: p for p in await uow.permissions.list_all()}
        return [
            role_to_dict(r, [perms[p] for p in r.permission_ids if p in perms]) for r in roles
        ]


class RoleResource:
    """PUT/DELETE /api/roles/{role_id}."""

    def __init__(self, update_role: UpdateRoleUseCase, delete_role: DeleteRoleUseCase) -> None:
        self._update_role = update_role
        self._delete_role = delete_role

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        target = parse_id(role_id)
        body = parse_body(RoleRequest, await read_body(req))
        await self._update_role.execute(actor_id(req), target, body.to_input())
        done(resp, "Role updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        await self._delete_role.execute(actor_id(req), parse_id(role_id))
        done(resp, "Role deleted successfully!")


class PermissionsResource:
    """GET/POST /api/permissions and GET /api/permissions/query."""

    def __init__(
        self, create_permission: CreatePermissionUseCase, unit_of_work_factory: type
    ) -> None:
        self._create_permission = create_permission
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            perms = await uow.permissions.list_all()
        ok(resp, [permission_to_dict(p) for p in perms])

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, PERMISSION_FIELDS)
        async with self._uow_factory() as uow:
            perms = await uow.permissions.find(query)
        ok(resp, [permission_to_dict(p) for p in perms])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(PermissionRequest, await read_body(req))
        perm = await self._create_permission.execute(actor_id(req), body.to_input())
        ok(resp, permission_to_dict(perm), falcon.HTTP_201)


class PermissionResource:
    """DELETE /api/permissions/{permission_id}."""

    def __init__(self, delete_permission: DeletePermissionUseCase) -> None:
        self._delete_permission = delete_permission

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        await self._delete_permission.execute(actor_id(req), parse_id(permission_id))
        done(resp, "Permission deleted successfully!")
