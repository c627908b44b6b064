"""Place DTOs."""

from dataclasses import dataclass, field

from travelrec.domain.value_objects import Location


@dataclass
class PlaceInput:
    """Input for creating or updating a place.

    upvotes and approved are privileged: they only take effect for callers
    allowed to manage places.
    """

    name: str
    description: str
    location: Location
    images: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    upvotes: int | None = None
    approved: bool | None = None
