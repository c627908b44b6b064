"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from travelrec.domain.value_objects import Social


@dataclass
class User:
    """Registered user with a single role."""

    id: UUID
    first_name: str
    last_name: str
    username: str
    email: str
    password_hash: str
    role_id: UUID
    register_date: datetime
    profile_picture: str = ""
    bio: str = ""
    country: str = ""
    city: str = ""
    socials: list[Social] = field(default_factory=list)
