"""Health check and welcome endpoints."""

import falcon
import falcon.asgi


class WelcomeResource:
    """GET /api/ - plain greeting."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.content_type = falcon.MEDIA_TEXT
        resp.text = "Hello Travelers!"


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, unit_of_work_factory: type | None = None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health/ready - readiness (database reachable)."""
        if self._uow_factory is not None:
            async with self._uow_factory() as uow:
                await uow.permissions.list_all()
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
