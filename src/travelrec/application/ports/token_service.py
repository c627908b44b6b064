"""Token service port - signed identity credentials."""

from dataclasses import dataclass
from typing import Protocol

from travelrec.domain.entities import User


@dataclass
class TokenClaims:
    """Identity carried by an access token."""

    id: str
    first_name: str
    last_name: str
    username: str
    email: str


class TokenService(Protocol):
    """Port for issuing and verifying access tokens."""

    def issue(self, user: User) -> str: ...

    def verify(self, token: str) -> TokenClaims | None: ...
