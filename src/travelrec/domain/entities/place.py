"""Place entity."""

from dataclasses import dataclass, field
from uuid import UUID

from travelrec.domain.value_objects import Location


@dataclass
class Place:
    """Place submitted by a user, visible to everyone once approved."""

    id: UUID
    name: str
    description: str
    location: Location
    created_by: UUID
    images: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    upvotes: int = 0
    approved: bool = False
