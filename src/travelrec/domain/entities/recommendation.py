"""Recommendation entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Recommendation:
    """Recommendation - a user's review of a place."""

    id: UUID
    created_by: UUID
    place_id: UUID
    title: str
    content: str
    date_of_visit: datetime
    date_of_writing: datetime
    rating: int
    upvotes: int = 0
