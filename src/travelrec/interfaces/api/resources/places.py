"""Place resources."""

import falcon
import falcon.asgi

from travelrec.application.dto.field_query import PLACE_FIELDS
from travelrec.application.use_cases.place.create_place import CreatePlaceUseCase
from travelrec.application.use_cases.place.delete_place import DeletePlaceUseCase
from travelrec.application.use_cases.place.update_place import UpdatePlaceUseCase
from travelrec.interfaces.api.presenters import place_to_dict
from travelrec.interfaces.api.resources.common import (
    actor_id,
    done,
    field_query,
    ok,
    parse_id,
    read_body,
)
from travelrec.interfaces.api.schemas.common import parse_body
from travelrec.interfaces.api.schemas.place_schemas import PlaceRequest


class PlacesResource:
    """GET/POST /api/places and GET /api/places/query."""

    def __init__(self, create_place: CreatePlaceUseCase, unit_of_work_factory: type) -> None:
        self._create_place = create_place
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            places = await uow.places.list_all()
        ok(resp, [place_to_dict(p) for p in places])

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, PLACE_FIELDS)
        async with self._uow_factory() as uow:
            places = await uow.places.find(query)
        ok(resp, [place_to_dict(p) for p in places])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(PlaceRequest, await read_body(req))
        place = await self._create_place.execute(actor_id(req), body.to_input())
        ok(resp, place_to_dict(place), falcon.HTTP_201)


class PlaceResource:
    """PUT/DELETE /api/places/{place_id}."""

    def __init__(self, update_place: UpdatePlaceUseCase, delete_place: DeletePlaceUseCase) -> None:
        self._update_place = update_place
        self._delete_place = delete_place

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, place_id: str
    ) -> None:
        target = parse_id(place_id)
        body = parse_body(PlaceRequest, await read_body(req))
        await self._update_place.execute(actor_id(req), target, body.to_input())
        done(resp, "Place updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, place_id: str
    ) -> None:
        removed = await self._delete_place.execute(actor_id(req), parse_id(place_id))
        done(
            resp,
            f"Place and its {removed} associated recommendations were deleted successfully!",
        )
