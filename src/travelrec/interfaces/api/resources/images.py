"""City and country image gallery resources."""

import falcon
import falcon.asgi

from travelrec.application.dto.field_query import CITY_FIELDS, COUNTRY_FIELDS
from travelrec.application.use_cases.images.city_images import (
    CreateCityImagesUseCase,
    DeleteCityImagesUseCase,
    UpdateCityImagesUseCase,
)
from travelrec.application.use_cases.images.country_images import (
    CreateCountryImagesUseCase,
    DeleteCountryImagesUseCase,
    UpdateCountryImagesUseCase,
)
from travelrec.interfaces.api.presenters import city_to_dict, country_to_dict
from travelrec.interfaces.api.resources.common import (
    done,
    field_query,
    ok,
    parse_id,
    read_body,
)
from travelrec.interfaces.api.schemas.common import parse_body
from travelrec.interfaces.api.schemas.content_schemas import (
    CityImagesRequest,
    CountryImagesRequest,
)


class CitiesResource:
    """GET/POST /api/cities and GET /api/cities/query."""

    def __init__(self, create_city: CreateCityImagesUseCase, unit_of_work_factory: type) -> None:
        self._create_city = create_city
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            cities = await uow.cities.list_all()
        ok(resp, [city_to_dict(c) for c in cities])

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, CITY_FIELDS)
        async with self._uow_factory() as uow:
            cities = await uow.cities.find(query)
        ok(resp, [city_to_dict(c) for c in cities])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(CityImagesRequest, await read_body(req))
        city = await self._create_city.execute(body.to_input())
        ok(resp, city_to_dict(city), falcon.HTTP_201)


class CityResource:
    """PUT/DELETE /api/cities/{city_id}."""

    def __init__(
        self, update_city: UpdateCityImagesUseCase, delete_city: DeleteCityImagesUseCase
    ) -> None:
        self._update_city = update_city
        self._delete_city = delete_city

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, city_id: str
    ) -> None:
        target = parse_id(city_id)
        body = parse_body(CityImagesRequest, await read_body(req))
        await self._update_city.execute(target, body.to_input())
        done(resp, "City updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, city_id: str
    ) -> None:
        await self._delete_city.execute(parse_id(city_id))
        done(resp, "City deleted successfully!")


class CountriesResource:
    """GET/POST /api/countries and GET /api/countries/query."""

    def __init__(
        self, create_country: CreateCountryImagesUseCase, unit_of_work_factory: type
    ) -> None:
        self._create_country = create_country
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async with self._uow_factory() as uow:
            countries = await uow.countries.list_all()
        ok(resp, [country_to_dict(c) for c in countries])

    async def on_get_query(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        query = field_query(req, COUNTRY_FIELDS)
        async with self._uow_factory() as uow:
            countries = await uow.countries.find(query)
        ok(resp, [country_to_dict(c) for c in countries])

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = parse_body(CountryImagesRequest, await read_body(req))
        country = await self._create_country.execute(body.to_input())
        ok(resp, country_to_dict(country), falcon.HTTP_201)


class CountryResource:
    """PUT/DELETE /api/countries/{country_id}."""

    def __init__(
        self,
        update_country: UpdateCountryImagesUseCase,
        delete_country: DeleteCountryImagesUseCase,
    ) -> None:
        self._update_country = update_country
        self._delete_country = delete_country

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, country_id: str
    ) -> None:
        target = parse_id(country_id)
        body = parse_body(CountryImagesRequest, await read_body(req))
        await self._update_country.execute(target, body.to_input())
        done(resp, "Country updated successfully!")

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, country_id: str
    ) -> None:
        await self._delete_country.execute(parse_id(country_id))
        done(resp, "Country deleted successfully!")
