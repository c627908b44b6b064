"""Recommendation, collection and image gallery request schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from travelrec.application.dto.content_dto import (
    CityImagesInput,
    CollectionInput,
    CountryImagesInput,
    RecommendationInput,
)
from travelrec.domain.value_objects import Image
from travelrec.interfaces.api.schemas.common import RequestSchema, RequiredUri, Text


class RecommendationRequest(RequestSchema):
    place: UUID
    title: Text(2, 255)
    content: Text(2, 500)
    date_of_visit: datetime = Field(alias="dateOfVisit")
    rating: int = Field(ge=1, le=5)
    upvotes: int = Field(default=0, ge=0)

    def to_input(self) -> RecommendationInput:
        return RecommendationInput(
            place_id=self.place,
            title=self.title,
            content=self.content,
            date_of_visit=self.date_of_visit,
            rating=self.rating,
            upvotes=self.upvotes,
        )


class CollectionRequest(RequestSchema):
    name: Text(2, 100)
    places: list[UUID] = Field(default_factory=list)
    visible: bool = False

    def to_input(self) -> CollectionInput:
        return CollectionInput(name=self.name, place_ids=list(self.places), visible=self.visible)


class ImageSchema(RequestSchema):
    url: RequiredUri
    alt: Text(2, 100)


class CityImagesRequest(RequestSchema):
    name: Text(2, 100)
    country: Text(2, 100)
    images: list[ImageSchema]

    def to_input(self) -> CityImagesInput:
        return CityImagesInput(
            name=self.name,
            country=self.country,
            images=[Image(url=i.url, alt=i.alt) for i in self.images],
        )


class CountryImagesRequest(RequestSchema):
    name: Text(2, 100)
    images: list[ImageSchema]

    def to_input(self) -> CountryImagesInput:
        return CountryImagesInput(
            name=self.name, images=[Image(url=i.url, alt=i.alt) for i in self.images]
        )
