"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from travelrec.application.dto.field_query import FieldQuery
from travelrec.domain.entities import User
from travelrec.domain.value_objects import Social
from travelrec.infrastructure.persistence.postgres.filters import build_condition

_SELECT = (
    "SELECT id, first_name, last_name, username, email, password_hash, role_id, "
    "register_date, profile_picture, bio, country, city, socials FROM app_user"
)

_COLUMNS = {
    "id": "id",
    "first_name": "first_name",
    "last_name": "last_name",
    "username": "username",
    "email": "email",
    "bio": "bio",
    "country": "country",
    "city": "city",
    "role_id": "role_id",
    "register_date": "register_date",
}


def _row_to_user(r) -> User:
    return User(
        id=r[0],
        first_name=r[1],
        last_name=r[2],
        username=r[3],
        email=r[4],
        password_hash=r[5],
        role_id=r[6],
        register_date=r[7],
        profile_picture=r[8],
        bio=r[9],
        country=r[10],
        city=r[11],
        socials=[Social(**s) for s in (r[12] or [])],
    )


def _socials_json(user: User) -> Jsonb:
    return Jsonb([{"name": s.name, "link": s.link, "icon": s.icon} for s in user.socials])


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE id = %s", (user_id,))
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email, ignoring case."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE lower(email) = lower(%s)", (email.strip(),)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username, ignoring case."""
        cur = await self._conn.execute(
            f"{_SELECT} WHERE lower(username) = lower(%s)", (username.strip(),)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def list_all(self) -> list[User]:
        """List all users."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY register_date")
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]:
        """List users with the given ids."""
        if not user_ids:
            return []
        cur = await self._conn.execute(f"{_SELECT} WHERE id = ANY(%s)", (list(user_ids),))
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def find(self, query: FieldQuery) -> list[User]:
        """List users matching a field query."""
        condition, params = build_condition(query, _COLUMNS)
        cur = await self._conn.execute(
            f"{_SELECT} WHERE {condition} ORDER BY register_date", params
        )
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            "INSERT INTO app_user (id, first_name, last_name, username, email, password_hash, "
            "role_id, register_date, profile_picture, bio, country, city, socials) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.first_name,
                user.last_name,
                user.username,
                user.email,
                user.password_hash,
                user.role_id,
                user.register_date,
                user.profile_picture,
                user.bio,
                user.country,
                user.city,
                _socials_json(user),
            ),
        )
        return user

    async def update(self, user: User) -> None:
        """Update profile fields and role. Email, hash and register date are left alone."""
        await self._conn.execute(
            "UPDATE app_user SET first_name=%s, last_name=%s, username=%s, role_id=%s, "
            "profile_picture=%s, bio=%s, country=%s, city=%s, socials=%s WHERE id=%s",
            (
                user.first_name,
                user.last_name,
                user.username,
                user.role_id,
                user.profile_picture,
                user.bio,
                user.country,
                user.city,
                _socials_json(user),
                user.id,
            ),
        )

    async def exists_with_role(self, role_id: UUID) -> bool:
        """True if any user has the role."""
        cur = await self._conn.execute(
            "SELECT 1 FROM app_user WHERE role_id = %s LIMIT 1", (role_id,)
        )
        return await cur.fetchone() is not None

    async def delete_all(self) -> None:
        """Delete every user."""
        await self._conn.execute("DELETE FROM app_user")
