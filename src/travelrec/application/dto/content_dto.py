"""Recommendation, collection and image gallery DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from travelrec.domain.value_objects import Image


@dataclass
class RecommendationInput:
    """Input for creating or updating a recommendation."""

    place_id: UUID
    title: str
    content: str
    date_of_visit: datetime
    rating: int
    upvotes: int = 0


@dataclass
class CollectionInput:
    """Input for creating or updating a collection."""

    name: str
    place_ids: list[UUID] = field(default_factory=list)
    visible: bool = False


@dataclass
class CityImagesInput:
    """Input for a city gallery."""

    name: str
    country: str
    images: list[Image] = field(default_factory=list)


@dataclass
class CountryImagesInput:
    """Input for a country gallery."""

    name: str
    images: list[Image] = field(default_factory=list)
