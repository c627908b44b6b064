"""Register user use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from travelrec.application.dto.user_dto import AuthResult, RegistrationInput
from travelrec.application.ports import PasswordHasher, TokenService
from travelrec.domain.entities import User
from travelrec.domain.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


class RegisterUserUseCase:
    """Create a user with the default role and issue a token."""

    def __init__(
        self,
        unit_of_work_factory: type,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._hasher = password_hasher
        self._tokens = token_service

    async def execute(self, data: RegistrationInput) -> AuthResult:
        """Register user. Email and username must be unused (case-insensitive)."""
        password_hash = await self._hasher.hash(data.password)

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(data.email):
                raise Conflict("Email already exists!")
            if await uow.users.get_by_username(data.username):
                raise Conflict("Username already taken!")

            role = await uow.roles.get_by_name(DEFAULT_ROLE)
            if not role:
                raise NotFound("Role", DEFAULT_ROLE)

            user = User(
                id=uuid4(),
                first_name=data.first_name,
                last_name=data.last_name,
                username=data.username,
                email=data.email,
                password_hash=password_hash,
                role_id=role.id,
                register_date=datetime.now(UTC),
            )
            await uow.users.create(user)

        logger.info("Registered user %s", user.id)
        return AuthResult(user_id=user.id, token=self._tokens.issue(user))
