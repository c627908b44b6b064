"""Auth middleware - verifies the `auth-token` header on mutating requests."""

from dataclasses import dataclass

import falcon
import falcon.asgi

from travelrec.application.ports import TokenService

TOKEN_HEADER = "auth-token"
PROTECTED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the token and sets req.context.user.

    Resources declaring `auth_exempt = True` (register, login) skip the check.
    Safe methods pass through anonymously.
    """

    def __init__(self, token_service: TokenService) -> None:
        self._tokens = token_service

    async def process_resource(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
    ) -> None:
        req.context.user = None
        if resource is None or req.method not in PROTECTED_METHODS:
            return
        if getattr(resource, "auth_exempt", False):
            return

        token = req.get_header(TOKEN_HEADER)
        if not token:
            raise falcon.HTTPBadRequest(title="Access denied!")
        claims = self._tokens.verify(token)
        if claims is None:
            raise falcon.HTTPUnauthorized(title="Invalid token!")
        req.context.user = RequestUser(
            user_id=claims.id, email=claims.email, username=claims.username
        )
