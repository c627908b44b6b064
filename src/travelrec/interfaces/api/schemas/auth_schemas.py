"""Registration and login request schemas."""

from typing import Annotated

from pydantic import AfterValidator, AliasChoices, EmailStr, Field, StringConstraints

from travelrec.application.dto.user_dto import LoginInput, RegistrationInput
from travelrec.interfaces.api.schemas.common import RequestSchema, Text

# bcrypt refuses passwords longer than 72 bytes
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[
    str, StringConstraints(min_length=6), AfterValidator(_check_password_bytes)
]
_PASSWORD_KEYS = AliasChoices("password", "passwordHash")


class RegisterRequest(RequestSchema):
    """POST /api/user/register body."""

    first_name: Text(2, 100) = Field(alias="firstName")
    last_name: Text(2, 100) = Field(alias="lastName")
    username: Text(2, 100)
    email: EmailStr
    password: Password = Field(validation_alias=_PASSWORD_KEYS)

    def to_input(self) -> RegistrationInput:
        return RegistrationInput(
            first_name=self.first_name,
            last_name=self.last_name,
            username=self.username,
            email=str(self.email),
            password=self.password,
        )


class LoginRequest(RequestSchema):
    """POST /api/user/login body."""

    email: EmailStr
    password: Password = Field(validation_alias=_PASSWORD_KEYS)

    def to_input(self) -> LoginInput:
        return LoginInput(email=str(self.email), password=self.password)
