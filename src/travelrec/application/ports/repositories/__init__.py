"""Repository ports."""

from travelrec.application.ports.repositories.city_images_repository import (
    CityImagesRepository,
)
from travelrec.application.ports.repositories.collection_repository import (
    CollectionRepository,
)
from travelrec.application.ports.repositories.country_images_repository import (
    CountryImagesRepository,
)
from travelrec.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from travelrec.application.ports.repositories.place_repository import PlaceRepository
from travelrec.application.ports.repositories.recommendation_repository import (
    RecommendationRepository,
)
from travelrec.application.ports.repositories.role_repository import RoleRepository
from travelrec.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "CityImagesRepository",
    "CollectionRepository",
    "CountryImagesRepository",
    "PermissionRepository",
    "PlaceRepository",
    "RecommendationRepository",
    "RoleRepository",
    "UserRepository",
]
