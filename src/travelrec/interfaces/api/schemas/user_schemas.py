"""User update request schema."""

from uuid import UUID

from pydantic import Field

from travelrec.application.dto.user_dto import UserUpdateInput
from travelrec.domain.value_objects import Social
from travelrec.interfaces.api.schemas.common import RequestSchema, RequiredUri, Text, Uri


class SocialSchema(RequestSchema):
    name: Text(2, 100)
    link: RequiredUri
    icon: Text(2, 100)


class UserUpdateRequest(RequestSchema):
    """PUT /api/users/{id} body. email, passwordHash and registerDate are ignored."""

    first_name: Text(2, 100) = Field(alias="firstName")
    last_name: Text(2, 100) = Field(alias="lastName")
    username: Text(2, 100)
    profile_picture: Uri = Field(default="", alias="profilePicture")
    bio: Text(0, 255) = ""
    country: Text(0, 100) = ""
    city: Text(0, 100) = ""
    socials: list[SocialSchema] = Field(default_factory=list)
    role: UUID | None = None

    def to_input(self) -> UserUpdateInput:
        return UserUpdateInput(
            first_name=self.first_name,
            last_name=self.last_name,
            username=self.username,
            profile_picture=self.profile_picture,
            bio=self.bio,
            country=self.country,
            city=self.city,
            socials=[Social(name=s.name, link=s.link, icon=s.icon) for s in self.socials],
            role_id=self.role,
        )
