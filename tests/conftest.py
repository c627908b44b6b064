"""Pytest fixtures for TravelRec tests."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import (
    CityImages,
    Collection,
    CountryImages,
    Permission,
    Place,
    Recommendation,
    Role,
    User,
)
from travelrec.domain.value_objects import Location, MatchStrategy, PermissionName

TEST_SECRET = "test-secret-for-hs256-signing-0123456789"


def _resolve(entity: object, attribute: str) -> object:
    value = entity
    for part in attribute.split("."):
        value = getattr(value, part)
    return value


def matches(entity: object, query: FieldQuery) -> bool:
    """Evaluate a FieldQuery in Python the way the SQL filters do."""
    actual = _resolve(entity, query.attribute)
    if query.strategy == MatchStrategy.TEXT:
        return str(query.value).lower() in str(actual).lower()
    if query.strategy == MatchStrategy.MEMBER:
        return query.value in actual
    if query.strategy == MatchStrategy.NUMBER:
        return float(actual) == query.value
    if query.strategy == MatchStrategy.DATE:
        return actual.astimezone(UTC).date() == query.value
    return actual == query.value


# --- Fake repositories ---


class _InMemoryStore:
    """Dict-backed store; hands out copies so unsaved mutations stay local."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, object] = {}

    def add(self, entity):
        self._by_id[entity.id] = copy.deepcopy(entity)
        return entity

    def _all(self) -> list:
        return [copy.deepcopy(e) for e in self._by_id.values()]

    async def get_by_id(self, entity_id: UUID):
        entity = self._by_id.get(entity_id)
        return copy.deepcopy(entity) if entity else None

    async def list_all(self) -> list:
        return self._all()

    async def list_by_ids(self, ids: list[UUID]) -> list:
        return [copy.deepcopy(self._by_id[i]) for i in ids if i in self._by_id]

    async def find(self, query: FieldQuery) -> list:
        return [e for e in self._all() if matches(e, query)]

    async def create(self, entity):
        return self.add(entity)

    async def update(self, entity) -> None:
        self._by_id[entity.id] = copy.deepcopy(entity)

    async def delete(self, entity_id: UUID) -> None:
        self._by_id.pop(entity_id, None)

    async def delete_all(self) -> None:
        self._by_id.clear()


class FakeUserRepository(_InMemoryStore):
    """In-memory user repository."""

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._all() if u.email.lower() == email.strip().lower()), None)

    async def get_by_username(self, username: str) -> User | None:
        return next(
            (u for u in self._all() if u.username.lower() == username.strip().lower()), None
        )

    async def exists_with_role(self, role_id: UUID) -> bool:
        return any(u.role_id == role_id for u in self._by_id.values())


class FakePermissionRepository(_InMemoryStore):
    """In-memory permission repository."""

    async def get_by_name(self, name: str) -> Permission | None:
        return next((p for p in self._all() if p.name == name), None)


class FakeRoleRepository(_InMemoryStore):
    """In-memory role repository resolving names through the permission store."""

    def __init__(self, permissions: FakePermissionRepository) -> None:
        super().__init__()
        self._permissions = permissions

    async def get_by_name(self, name: str) -> Role | None:
        return next((r for r in self._all() if r.name.lower() == name.strip().lower()), None)

    async def exists_with_permission(self, permission_id: UUID) -> bool:
        return any(permission_id in r.permission_ids for r in self._by_id.values())

    async def get_permission_names(self, role_id: UUID) -> list[str]:
        role = self._by_id.get(role_id)
        if not role:
            return []
        perms = await self._permissions.list_by_ids(role.permission_ids)
        return [p.name for p in perms]


class FakePlaceRepository(_InMemoryStore):
    """In-memory place repository."""

    async def get_by_name(self, name: str, city: str, country: str) -> Place | None:
        key = (name.strip().lower(), city.strip().lower(), country.strip().lower())
        return next(
            (
                p
                for p in self._all()
                if (p.name.lower(), p.location.city.lower(), p.location.country.lower()) == key
            ),
            None,
        )


class FakeRecommendationRepository(_InMemoryStore):
    """In-memory recommendation repository."""

    async def delete_by_place(self, place_id: UUID) -> int:
        doomed = [r.id for r in self._by_id.values() if r.place_id == place_id]
        for rec_id in doomed:
            del self._by_id[rec_id]
        return len(doomed)


class FakeCollectionRepository(_InMemoryStore):
    """In-memory collection repository."""

    async def remove_place(self, place_id: UUID) -> None:
        for coll in self._by_id.values():
            coll.place_ids = [p for p in coll.place_ids if p != place_id]


class FakeCityImagesRepository(_InMemoryStore):
    """In-memory city gallery repository."""

    async def get_by_name(self, name: str, country: str) -> CityImages | None:
        key = (name.strip().lower(), country.strip().lower())
        return next(
            (c for c in self._all() if (c.name.lower(), c.country.lower()) == key), None
        )


class FakeCountryImagesRepository(_InMemoryStore):
    """In-memory country gallery repository."""

    async def get_by_name(self, name: str) -> CountryImages | None:
        return next((c for c in self._all() if c.name.lower() == name.strip().lower()), None)


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.permissions = FakePermissionRepository()
        self.roles = FakeRoleRepository(self.permissions)
        self.places = FakePlaceRepository()
        self.recommendations = FakeRecommendationRepository()
        self.collections = FakeCollectionRepository()
        self.cities = FakeCityImagesRepository()
        self.countries = FakeCountryImagesRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Builders ---


def make_permission(name: PermissionName | str, description: str = "desc") -> Permission:
    return Permission(id=uuid4(), name=str(name), description=description)


def make_user(role_id: UUID, username: str = "traveler", email: str | None = None) -> User:
    return User(
        id=uuid4(),
        first_name="Ada",
        last_name="Lovelace",
        username=username,
        email=email or f"{username}@example.com",
        password_hash="hashed:secret1",
        role_id=role_id,
        register_date=datetime(2024, 5, 17, 10, 30, tzinfo=UTC),
    )


def make_place(created_by: UUID, name: str = "Old Bridge", city: str = "Mostar") -> Place:
    return Place(
        id=uuid4(),
        name=name,
        description="Rebuilt 16th-century bridge",
        location=Location(
            continent="Europe",
            country="Bosnia and Herzegovina",
            city=city,
            street="Stari most",
            street_number="1",
        ),
        created_by=created_by,
        images=["https://img.example.com/bridge.jpg"],
        tags=["bridge", "history"],
    )


def make_recommendation(created_by: UUID, place_id: UUID) -> Recommendation:
    return Recommendation(
        id=uuid4(),
        created_by=created_by,
        place_id=place_id,
        title="Worth the trip",
        content="Go early to watch the divers.",
        date_of_visit=datetime(2024, 6, 1, 9, 0, tzinfo=UTC),
        date_of_writing=datetime(2024, 6, 3, 18, 0, tzinfo=UTC),
        rating=5,
    )


def make_collection(created_by: UUID, place_ids: list[UUID]) -> Collection:
    return Collection(id=uuid4(), created_by=created_by, name="Balkans", place_ids=place_ids)


class SeededWorld:
    """FakeUnitOfWork with the baseline permissions, roles and one user per role."""

    def __init__(self) -> None:
        self.uow = FakeUnitOfWork()
        self.assign_roles = self.uow.permissions.add(make_permission(PermissionName.ASSIGN_ROLES))
        self.manage_places = self.uow.permissions.add(
            make_permission(PermissionName.MANAGE_PLACES)
        )
        self.admin_role = self.uow.roles.add(
            Role(
                id=uuid4(),
                name="admin",
                permission_ids=[self.assign_roles.id, self.manage_places.id],
            )
        )
        self.editor_role = self.uow.roles.add(
            Role(id=uuid4(), name="editor", permission_ids=[self.manage_places.id])
        )
        self.user_role = self.uow.roles.add(Role(id=uuid4(), name="user"))
        self.admin = self.uow.users.add(make_user(self.admin_role.id, "admin"))
        self.editor = self.uow.users.add(make_user(self.editor_role.id, "editor"))
        self.member = self.uow.users.add(make_user(self.user_role.id, "member"))
        self.factory = make_factory(self.uow)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def world() -> SeededWorld:
    """Baseline admin/editor/user roles with one user each."""
    return SeededWorld()


class FakePasswordHasher:
    """Reversible stand-in for bcrypt so tests stay fast."""

    async def hash(self, password: str) -> str:
        return f"hashed:{password}"

    async def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def mock_authorizer():
    """AsyncMock for Authorizer - allows by default."""
    mock = AsyncMock()
    mock.is_allowed.return_value = True
    return mock
