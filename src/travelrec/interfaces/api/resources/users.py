"""User resources."""

import falcon.asgi

from travelrec.application.dto.field_query import USER_FIELDS
from travelrec.application.use_cases.user.update_user import UpdateUserUseCase
from travelrec.domain.entities import User
from travelrec.interfaces.api.presenters import user_to_dict
from travelrec.interfaces.api.resources.common import (
    actor_id,
    done,
    field_query,
    ok,
    parse_id,
    read_body,
)
from travelrec.interfaces.api.schemas.common import parse_body
from travelrec.interfaces.api.schemas.user_schemas import UserUpdateRequest


class UsersResource:
    """GET /api/users and /api/users/query. `populate=true` embeds the role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            users = await uow.users.list_all()
            ok(resp, await self._render(uow, req, users))

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, USER_FIELDS)
        async with self._uow_factory() as uow:
            users = await uow.users.find(query)
            ok(resp, await self._render(uow, req, users))

    async def _render(self, uow, req: falcon.asgi.Request, users: list[User]) -> list[dict]:
        if not req.get_param_as_bool("populate", default=False):
            return [user_to_dict(u) for u in users]
        roles = {r.id: r for r in await uow.roles.list_all()}
        return [user_to_dict(u, roles.get(u.role_id)) for u in users]


class UserResource:
    """PUT /api/users/{user_id} - profile update, role change is privileged."""

    def __init__(self, update_user: UpdateUserUseCase) -> None:
        self._update_user = update_user

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        target = parse_id(user_id)
        body = parse_body(UserUpdateRequest, await read_body(req))
        await self._update_user.execute(actor_id(req), target, body.to_input())
        done(resp, "User updated successfully!")
