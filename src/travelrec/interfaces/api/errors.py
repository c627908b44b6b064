"""Translate domain exceptions into HTTP responses."""

import logging

import falcon
import falcon.asgi

from travelrec.domain.exceptions import (
    AuthenticationFailed,
    Conflict,
    DanglingReference,
    IntegrityError,
    NotFound,
    PermissionDenied,
    TravelRecError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS: dict[type[TravelRecError], str] = {
    ValidationError: falcon.HTTP_400,
    AuthenticationFailed: falcon.HTTP_400,
    Conflict: falcon.HTTP_400,
    IntegrityError: falcon.HTTP_400,
    NotFound: falcon.HTTP_404,
    PermissionDenied: falcon.HTTP_403,
    DanglingReference: falcon.HTTP_500,
}


def status_for(ex: TravelRecError) -> str:
    for exc_type in type(ex).__mro__:
        if exc_type in _STATUS:
            return _STATUS[exc_type]
    return falcon.HTTP_500


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: TravelRecError, params: dict
) -> None:
    status = status_for(ex)
    if status == falcon.HTTP_500:
        logger.error("Data integrity failure on %s %s: %s", req.method, req.path, ex)
    resp.status = status
    resp.media = {"error": str(ex)}


async def handle_http_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: falcon.HTTPError, params: dict
) -> None:
    resp.status = ex.status
    if ex.headers:
        resp.set_headers(ex.headers)
    resp.media = {"error": ex.title}


async def handle_unexpected(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Most specific handler wins, so registration order does not matter."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(falcon.HTTPError, handle_http_error)
    app.add_error_handler(TravelRecError, handle_domain_error)
