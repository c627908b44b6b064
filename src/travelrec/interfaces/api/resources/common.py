"""Helpers shared by the HTTP resources."""

from collections.abc import Mapping
from typing import Any
from uuid import UUID

import falcon.asgi

from travelrec.application.dto.field_query import FieldQuery, QueryableField, parse_field_query
from travelrec.domain.exceptions import ValidationError


def parse_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError("Invalid Id format!") from None


def actor_id(req: falcon.asgi.Request) -> str:
    """Id of the authenticated caller, set by AuthMiddleware."""
    return req.context.user.user_id


def field_query(req: falcon.asgi.Request, fields: Mapping[str, QueryableField]) -> FieldQuery:
    return parse_field_query(fields, req.get_param("field"), req.get_param("value"))


async def read_body(req: falcon.asgi.Request) -> Any:
    return await req.get_media(default_when_empty=None)


def ok(resp: falcon.asgi.Response, data: Any, status: str = falcon.HTTP_200) -> None:
    resp.status = status
    resp.media = {"error": None, "data": data}


def done(resp: falcon.asgi.Response, message: str) -> None:
    resp.status = falcon.HTTP_200
    resp.media = {"error": None, "message": message}
