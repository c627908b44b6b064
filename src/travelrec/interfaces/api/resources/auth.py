"""Registration and login resources."""

import falcon
import falcon.asgi

from travelrec.application.use_cases.auth.login_user import LoginUserUseCase
from travelrec.application.use_cases.auth.register_user import RegisterUserUseCase
from travelrec.interfaces.api.middleware.auth import TOKEN_HEADER
from travelrec.interfaces.api.resources.common import ok, read_body
from travelrec.interfaces.api.schemas.auth_schemas import LoginRequest, RegisterRequest
from travelrec.interfaces.api.schemas.common import parse_body


class RegisterResource:
    """POST /api/user/register."""

    auth_exempt = True

    def __init__(self, register_user: RegisterUserUseCase) -> None:
        self._register_user = register_user

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(RegisterRequest, await read_body(req))
        result = await self._register_user.execute(body.to_input())
        resp.set_header(TOKEN_HEADER, result.token)
        ok(resp, {"userId": str(result.user_id), "token": result.token}, falcon.HTTP_201)


class LoginResource:
    """POST /api/user/login."""

    auth_exempt = True

    def __init__(self, login_user: LoginUserUseCase) -> None:
        self._login_user = login_user

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(LoginRequest, await read_body(req))
        result = await self._login_user.execute(body.to_input())
        resp.set_header(TOKEN_HEADER, result.token)
        ok(resp, {"userId": str(result.user_id), "token": result.token})
