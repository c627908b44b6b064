"""Collection entity."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class Collection:
    """Collection - user curated list of places."""

    id: UUID
    created_by: UUID
    name: str
    place_ids: list[UUID] = field(default_factory=list)
    visible: bool = False
