"""JWT token service using PyJWT with HMAC-SHA256."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError

from travelrec.application.ports.token_service import TokenClaims
from travelrec.domain.entities import User


class JWTTokenService:
    """Issues and validates `auth-token` credentials."""

    def __init__(self, secret_key: str, ttl_hours: int = 2) -> None:
        if not secret_key:
            raise ValueError("Token secret must not be empty")
        self._secret_key = secret_key
        self._ttl = timedelta(hours=ttl_hours)
        self._algorithm = "HS256"

    def issue(self, user: User) -> str:
        """Sign a token carrying the user's public identity."""
        now = datetime.now(UTC)
        payload = {
            "firstName": user.first_name,
            "lastName": user.last_name,
            "username": user.username,
            "email": user.email,
            "id": str(user.id),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims | None:
        """Validate signature and expiry, return claims or None."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id"]},
            )
        except InvalidTokenError:
            return None
        return TokenClaims(
            id=payload["id"],
            first_name=payload.get("firstName", ""),
            last_name=payload.get("lastName", ""),
            username=payload.get("username", ""),
            email=payload.get("email", ""),
        )
