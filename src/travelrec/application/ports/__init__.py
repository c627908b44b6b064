"""Application ports - interfaces for external adapters."""

from travelrec.application.ports.authorizer import Authorizer
from travelrec.application.ports.password_hasher import PasswordHasher
from travelrec.application.ports.token_service import TokenClaims, TokenService
from travelrec.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Authorizer",
    "PasswordHasher",
    "TokenClaims",
    "TokenService",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
