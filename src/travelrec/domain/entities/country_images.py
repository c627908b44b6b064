"""Country image gallery entity."""

from dataclasses import dataclass, field
from uuid import UUID

from travelrec.domain.value_objects import Image


@dataclass
class CountryImages:
    """Images of a country, unique by name."""

    id: UUID
    name: str
    images: list[Image] = field(default_factory=list)
