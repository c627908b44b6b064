"""Recommendation and collection resources."""

import falcon
import falcon.asgi

from travelrec.application.dto.field_query import COLLECTION_FIELDS, RECOMMENDATION_FIELDS
from travelrec.application.use_cases.collection.create_collection import CreateCollectionUseCase
from travelrec.application.use_cases.collection.delete_collection import DeleteCollectionUseCase
from travelrec.application.use_cases.collection.update_collection import UpdateCollectionUseCase
from travelrec.application.use_cases.recommendation.create_recommendation import (
    CreateRecommendationUseCase,
)
from travelrec.application.use_cases.recommendation.delete_recommendation import (
    DeleteRecommendationUseCase,
)
from travelrec.application.use_cases.recommendation.update_recommendation import (
    UpdateRecommendationUseCase,
)
from travelrec.domain.entities import Collection, Recommendation
from travelrec.interfaces.api.presenters import collection_to_dict, recommendation_to_dict
from travelrec.interfaces.api.resources.common import (
    actor_id,
    done,
    field_query,
    ok,
    parse_id,
    read_body,
)
from travelrec.interfaces.api.schemas.common import parse_body
from travelrec.interfaces.api.schemas.content_schemas import (
    CollectionRequest,
    RecommendationRequest,
)


def _populate_flags(req: falcon.asgi.Request) -> tuple[bool, bool]:
    return (
        req.get_param_as_bool("populateCreatedBy", default=False),
        req.get_param_as_bool("populatePlace", default=False),
    )


async def _creators(uow, ids) -> dict:
    return {u.id: u for u in await uow.users.list_by_ids(list(set(ids)))}


async def _places(uow, ids) -> dict:
    return {p.id: p for p in await uow.places.list_by_ids(list(set(ids)))}


class RecommendationsResource:
    """GET/POST /api/recommendations and GET /api/recommendations/query.

    `populateCreatedBy` and `populatePlace` embed the author's public profile
    and the reviewed place.
    """

    def __init__(
        self, create_recommendation: CreateRecommendationUseCase, unit_of_work_factory: type
    ) -> None:
        self._create_recommendation = create_recommendation
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            recs = await uow.recommendations.list_all()
            ok(resp, await self._render(uow, req, recs))

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, RECOMMENDATION_FIELDS)
        async with self._uow_factory() as uow:
            recs = await uow.recommendations.find(query)
            ok(resp, await self._render(uow, req, recs))

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(RecommendationRequest, await read_body(req))
        rec = await self._create_recommendation.execute(actor_id(req), body.to_input())
        ok(resp, recommendation_to_dict(rec), falcon.HTTP_201)

    async def _render(
        self, uow, req: falcon.asgi.Request, recs: list[Recommendation]
    ) -> list[dict]:
        with_creator, with_place = _populate_flags(req)
        creators = await _creators(uow, (r.created_by for r in recs)) if with_creator else {}
        places = await _places(uow, (r.place_id for r in recs)) if with_place else {}
        return [
            recommendation_to_dict(r, creators.get(r.created_by), places.get(r.place_id))
            for r in recs
        ]


class RecommendationResource:
    """PUT/DELETE /api/recommendations/{recommendation_id}."""

    def __init__(
        self,
        update_recommendation: UpdateRecommendationUseCase,
        delete_recommendation: DeleteRecommendationUseCase,
    ) -> None:
        self._update_recommendation = update_recommendation
        self._delete_recommendation = delete_recommendation

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, recommendation_id: str
    ) -> None:
        target = parse_id(recommendation_id)
        body = parse_body(RecommendationRequest, await read_body(req))
        await self._update_recommendation.execute(actor_id(req), target, body.to_input())
        done(resp, "Recommendation updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, recommendation_id: str
    ) -> None:
        await self._delete_recommendation.execute(actor_id(req), parse_id(recommendation_id))
        done(resp, "Recommendation deleted successfully!")


class CollectionsResource:
    """GET/POST /api/collections and GET /api/collections/query."""

    def __init__(
        self, create_collection: CreateCollectionUseCase, unit_of_work_factory: type
    ) -> None:
        self._create_collection = create_collection
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            colls = await uow.collections.list_all()
            ok(resp, await self._render(uow, req, colls))

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, COLLECTION_FIELDS)
        async with self._uow_factory() as uow:
            colls = await uow.collections.find(query)
            ok(resp, await self._render(uow, req, colls))

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(CollectionRequest, await read_body(req))
        coll = await self._create_collection.execute(actor_id(req), body.to_input())
        ok(resp, collection_to_dict(coll), falcon.HTTP_201)

    async def _render(self, uow, req: falcon.asgi.Request, colls: list[Collection]) -> list[dict]:
        with_creator, with_place = _populate_flags(req)
        creators = await _creators(uow, (c.created_by for c in colls)) if with_creator else {}
        places = (
            await _places(uow, (p for c in colls for p in c.place_ids)) if with_place else {}
        )
        return [
            collection_to_dict(
                c,
                creators.get(c.created_by),
                [places[p] for p in c.place_ids if p in places] if with_place else None,
            )
            for c in colls
        ]


class CollectionResource:
    """PUT/DELETE /api/collections/{collection_id}."""

    def __init__(
        self,
        update_collection: UpdateCollectionUseCase,
        delete_collection: DeleteCollectionUseCase,
    ) -> None:
        self._update_collection = update_collection
        self._delete_collection = delete_collection

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, collection_id: str
    ) -> None:
        target = parse_id(collection_id)
        body = parse_body(CollectionRequest, await read_body(req))
        await self._update_collection.execute(actor_id(req), target, body.to_input())
        done(resp, "Collection updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, collection_id: str
    ) -> None:
        await self._delete_collection.execute(actor_id(req), parse_id(collection_id))
        done(resp, "Collection deleted successfully!")
