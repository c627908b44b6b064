"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi
from falcon.asgi import App

from travelrec.interfaces.api.errors import register_error_handlers
from travelrec.interfaces.api.resources.access import (
    PermissionResource,
    PermissionsResource,
    RoleResource,
    RolesResource,
)
from travelrec.interfaces.api.resources.auth import LoginResource, RegisterResource
from travelrec.interfaces.api.resources.content import (
    CollectionResource,
    CollectionsResource,
    RecommendationResource,
    RecommendationsResource,
)
from travelrec.interfaces.api.resources.health import HealthResource, WelcomeResource
from travelrec.interfaces.api.resources.images import (
    CitiesResource,
    CityResource,
    CountriesResource,
    CountryResource,
)
from travelrec.interfaces.api.resources.places import PlaceResource, PlacesResource
from travelrec.interfaces.api.resources.users import UserResource, UsersResource


@dataclass
class ApiResources:
    """Every resource the API routes to."""

    health: HealthResource
    register: RegisterResource
    login: LoginResource
    users: UsersResource
    user: UserResource
    roles: RolesResource
    role: RoleResource
    permissions: PermissionsResource
    permission: PermissionResource
    places: PlacesResource
    place: PlaceResource
    recommendations: RecommendationsResource
    recommendation: RecommendationResource
    collections: CollectionsResource
    collection: CollectionResource
    cities: CitiesResource
    city: CityResource
    countries: CountriesResource
    country: CountryResource


def _add_collection_routes(app: App, path: str, listing, item, id_name: str) -> None:
    app.add_route(path, listing)
    app.add_route(f"{path}/query", listing, suffix="query")
    app.add_route(f"{path}/{{{id_name}}}", item)


def create_app(resources: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes under /api."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.req_options.strip_url_path_trailing_slash = True
    register_error_handlers(app)

    r = resources
    app.add_route("/api", WelcomeResource())
    app.add_route("/api/health", r.health)
    app.add_route("/api/health/ready", r.health, suffix="ready")
    app.add_route("/api/user/register", r.register)
    app.add_route("/api/user/login", r.login)
    _add_collection_routes(app, "/api/users", r.users, r.user, "user_id")
    _add_collection_routes(app, "/api/roles", r.roles, r.role, "role_id")
    _add_collection_routes(app, "/api/permissions", r.permissions, r.permission, "permission_id")
    _add_collection_routes(app, "/api/places", r.places, r.place, "place_id")
    _add_collection_routes(
        app, "/api/recommendations", r.recommendations, r.recommendation, "recommendation_id"
    )
    _add_collection_routes(app, "/api/collections", r.collections, r.collection, "collection_id")
    _add_collection_routes(app, "/api/cities", r.cities, r.city, "city_id")
    _add_collection_routes(app, "/api/countries", r.countries, r.country, "country_id")
    return app
