"""City image gallery entity."""

from dataclasses import dataclass, field
from uuid import UUID

from travelrec.domain.value_objects import Image


@dataclass
class CityImages:
    """Images of a city, unique by name within its country."""

    id: UUID
    name: str
    country: str
    images: list[Image] = field(default_factory=list)
