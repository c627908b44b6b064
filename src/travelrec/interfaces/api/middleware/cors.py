"""CORS middleware - adds Access-Control-Allow-Origin headers."""

import falcon
import falcon.asgi

from travelrec.interfaces.api.middleware.auth import TOKEN_HEADER


class CORSMiddleware:
    """Middleware that adds CORS headers and handles OPTIONS preflight.

    An origin list containing `*` allows any origin.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = origins
        self._any = "*" in origins

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if self._any:
            resp.set_header("Access-Control-Allow-Origin", "*")
        elif origin and origin in self._origins:
            resp.set_header("Access-Control-Allow-Origin", origin)
            resp.set_header("Vary", "Origin")
        elif self._origins:
            resp.set_header("Access-Control-Allow-Origin", self._origins[0])
        resp.set_header("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS")
        resp.set_header("Access-Control-Allow-Headers", f"{TOKEN_HEADER}, Content-Type")
        resp.set_header("Access-Control-Expose-Headers", TOKEN_HEADER)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Answer preflight requests before routing."""
        if req.method == "OPTIONS":
            self._set_cors_headers(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._set_cors_headers(req, resp)
