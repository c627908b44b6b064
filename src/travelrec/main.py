"""Application entry point and composition root."""

import asyncio
import logging

import falcon.asgi

from travelrec import __version__
from travelrec.application.use_cases.auth.login_user import LoginUserUseCase
from travelrec.application.use_cases.auth.register_user import RegisterUserUseCase
from travelrec.application.use_cases.collection.create_collection import CreateCollectionUseCase
from travelrec.application.use_cases.collection.delete_collection import DeleteCollectionUseCase
from travelrec.application.use_cases.collection.update_collection import UpdateCollectionUseCase
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
from travelrec.application.use_cases.permission.create_permission import CreatePermissionUseCase
from travelrec.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from travelrec.application.use_cases.place.create_place import CreatePlaceUseCase
from travelrec.application.use_cases.place.delete_place import DeletePlaceUseCase
from travelrec.application.use_cases.place.update_place import UpdatePlaceUseCase
from travelrec.application.use_cases.recommendation.create_recommendation import (
    CreateRecommendationUseCase,
)
from travelrec.application.use_cases.recommendation.delete_recommendation import (
    DeleteRecommendationUseCase,
)
from travelrec.application.use_cases.recommendation.update_recommendation import (
    UpdateRecommendationUseCase,
)
from travelrec.application.use_cases.role.create_role import CreateRoleUseCase
from travelrec.application.use_cases.role.delete_role import DeleteRoleUseCase
from travelrec.application.use_cases.role.update_role import UpdateRoleUseCase
from travelrec.application.use_cases.seed.seed_data import SeedDataUseCase
from travelrec.application.use_cases.user.update_user import UpdateUserUseCase
from travelrec.config import Settings, get_settings
from travelrec.infrastructure.auth.bcrypt_password_hasher import BcryptPasswordHasher
from travelrec.infrastructure.auth.jwt_token_service import JWTTokenService
from travelrec.infrastructure.permission.role_authorizer import RoleAuthorizer
from travelrec.infrastructure.persistence.postgres.connection import create_pool
from travelrec.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from travelrec.interfaces.api.app import ApiResources, create_app
from travelrec.interfaces.api.middleware.auth import AuthMiddleware
from travelrec.interfaces.api.middleware.cors import CORSMiddleware
from travelrec.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from travelrec.interfaces.api.resources.health import HealthResource
from travelrec.interfaces.api.resources.images import (
    CitiesResource,
    CityResource,
    CountriesResource,
    CountryResource,
)
from travelrec.interfaces.api.resources.places import PlaceResource, PlacesResource
from travelrec.interfaces.api.resources.users import UserResource, UsersResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_resources(uow_factory, settings: Settings) -> tuple[ApiResources, JWTTokenService]:
    """Wire use cases and resources around one unit-of-work factory."""
    tokens = JWTTokenService(settings.token_secret, ttl_hours=settings.token_ttl_hours)
    hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    authorizer = RoleAuthorizer(uow_factory)

    resources = ApiResources(
        health=HealthResource(uow_factory),
        register=RegisterResource(RegisterUserUseCase(uow_factory, hasher, tokens)),
        login=LoginResource(LoginUserUseCase(uow_factory, hasher, tokens)),
        users=UsersResource(uow_factory),
        user=UserResource(UpdateUserUseCase(uow_factory, authorizer)),
        roles=RolesResource(CreateRoleUseCase(uow_factory, authorizer), uow_factory),
        role=RoleResource(
            UpdateRoleUseCase(uow_factory, authorizer),
            DeleteRoleUseCase(uow_factory, authorizer),
        ),
        permissions=PermissionsResource(
            CreatePermissionUseCase(uow_factory, authorizer), uow_factory
        ),
        permission=PermissionResource(DeletePermissionUseCase(uow_factory, authorizer)),
        places=PlacesResource(CreatePlaceUseCase(uow_factory, authorizer), uow_factory),
        place=PlaceResource(
            UpdatePlaceUseCase(uow_factory, authorizer),
            DeletePlaceUseCase(uow_factory, authorizer),
        ),
        recommendations=RecommendationsResource(
            CreateRecommendationUseCase(uow_factory), uow_factory
        ),
        recommendation=RecommendationResource(
            UpdateRecommendationUseCase(uow_factory),
            DeleteRecommendationUseCase(uow_factory),
        ),
        collections=CollectionsResource(CreateCollectionUseCase(uow_factory), uow_factory),
        collection=CollectionResource(
            UpdateCollectionUseCase(uow_factory),
            DeleteCollectionUseCase(uow_factory),
        ),
        cities=CitiesResource(CreateCityImagesUseCase(uow_factory), uow_factory),
        city=CityResource(
            UpdateCityImagesUseCase(uow_factory), DeleteCityImagesUseCase(uow_factory)
        ),
        countries=CountriesResource(CreateCountryImagesUseCase(uow_factory), uow_factory),
        country=CountryResource(
            UpdateCountryImagesUseCase(uow_factory), DeleteCountryImagesUseCase(uow_factory)
        ),
    )
    return resources, tokens


def create_travelrec_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(settings.dbhost, settings.db_pool_min_size, settings.db_pool_max_size)
    uow_factory = create_uow_factory(pool)
    resources, tokens = build_resources(uow_factory, settings)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = create_app(
        resources,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(tokens),
        ],
    )
    logger.info("TravelRec v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "travelrec.main:create_travelrec_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


async def _seed(settings: Settings) -> None:
    pool = create_pool(settings.dbhost, min_size=1, max_size=2)
    await pool.open()
    try:
        seeder = SeedDataUseCase(
            create_uow_factory(pool), BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        )
        admin = await seeder.execute(settings.seed_admin_email, settings.seed_admin_password)
        logger.info("Seeded admin user %s (%s)", admin.username, admin.email)
    finally:
        await pool.close()


def seed() -> None:
    """CLI entry point - reset and seed permissions, roles and the admin user."""
    settings = get_settings()
    configure_logging(settings)
    asyncio.run(_seed(settings))
