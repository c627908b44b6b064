"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from travelrec.infrastructure.persistence.postgres.collection_repository import (
    PostgresCollectionRepository,
)
from travelrec.infrastructure.persistence.postgres.image_repositories import (
    PostgresCityImagesRepository,
    PostgresCountryImagesRepository,
)
from travelrec.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from travelrec.infrastructure.persistence.postgres.place_repository import (
    PostgresPlaceRepository,
)
from travelrec.infrastructure.persistence.postgres.recommendation_repository import (
    PostgresRecommendationRepository,
)
from travelrec.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from travelrec.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._users = PostgresUserRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._permissions = PostgresPermissionRepository(self._conn)
        self._places = PostgresPlaceRepository(self._conn)
        self._recommendations = PostgresRecommendationRepository(self._conn)
        self._collections = PostgresCollectionRepository(self._conn)
        self._cities = PostgresCityImagesRepository(self._conn)
        self._countries = PostgresCountryImagesRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def places(self) -> PostgresPlaceRepository:
        return self._places

    @property
    def recommendations(self) -> PostgresRecommendationRepository:
        return self._recommendations

    @property
    def collections(self) -> PostgresCollectionRepository:
        return self._collections

    @property
    def cities(self) -> PostgresCityImagesRepository:
        return self._cities

    @property
    def countries(self) -> PostgresCountryImagesRepository:
        return self._countries

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
