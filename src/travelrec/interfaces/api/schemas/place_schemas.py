"""Place request schema."""

from pydantic import Field

from travelrec.application.dto.place_dto import PlaceInput
from travelrec.domain.value_objects import Location
from travelrec.interfaces.api.schemas.common import RequestSchema, Text


class LocationSchema(RequestSchema):
    continent: Text(2, 100)
    country: Text(2, 100)
    city: Text(2, 100)
    street: Text(2, 100)
    street_number: Text(1, 10) = Field(alias="streetNumber")


class PlaceRequest(RequestSchema):
    """POST/PUT /api/places body. upvotes and approved are privileged."""

    name: Text(2, 255)
    description: Text(2, 500)
    images: list[Text(1, 2048)]
    location: LocationSchema
    tags: list[Text(1, 100)]
    upvotes: int | None = Field(default=None, ge=0)
    approved: bool | None = None

    def to_input(self) -> PlaceInput:
        loc = self.location
        return PlaceInput(
            name=self.name,
            description=self.description,
            location=Location(
                continent=loc.continent,
                country=loc.country,
                city=loc.city,
                street=loc.street,
                street_number=loc.street_number,
            ),
            images=list(self.images),
            tags=list(self.tags),
            upvotes=self.upvotes,
            approved=self.approved,
        )
