"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from travelrec.application.ports.repositories import (
    CityImagesRepository,
    CollectionRepository,
    CountryImagesRepository,
    PermissionRepository,
    PlaceRepository,
    RecommendationRepository,
    RoleRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def places(self) -> PlaceRepository: ...

    @property
    def recommendations(self) -> RecommendationRepository: ...

    @property
    def collections(self) -> CollectionRepository: ...

    @property
    def cities(self) -> CityImagesRepository: ...

    @property
    def countries(self) -> CountryImagesRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
