"""User and authentication DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from travelrec.domain.value_objects import Social


@dataclass
class RegistrationInput:
    """Input for registering a user."""

    first_name: str
    last_name: str
    username: str
    email: str
    password: str


@dataclass
class LoginInput:
    """Input for logging in."""

    email: str
    password: str


@dataclass
class AuthResult:
    """Identity and signed token returned by register and login."""

    user_id: UUID
    token: str


@dataclass
class UserUpdateInput:
    """Profile fields a user update may change. role_id None keeps the role."""

    first_name: str
    last_name: str
    username: str
    profile_picture: str = ""
    bio: str = ""
    country: str = ""
    city: str = ""
    socials: list[Social] = field(default_factory=list)
    role_id: UUID | None = None
