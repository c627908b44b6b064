"""Login use case."""

from travelrec.application.dto.user_dto import AuthResult, LoginInput
from travelrec.application.ports import PasswordHasher, TokenService
from travelrec.domain.exceptions import AuthenticationFailed


class LoginUserUseCase:
    """Verify credentials and issue a token."""

    def __init__(
        self,
        unit_of_work_factory: type,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._hasher = password_hasher
        self._tokens = token_service

    async def execute(self, data: LoginInput) -> AuthResult:
        """Return token for matching email and password."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(data.email)

        if not user or not await self._hasher.verify(data.password, user.password_hash):
            raise AuthenticationFailed("Email or password is wrong!")

        return AuthResult(user_id=user.id, token=self._tokens.issue(user))
