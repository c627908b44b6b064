"""Domain entities."""

from travelrec.domain.entities.city_images import CityImages
from travelrec.domain.entities.collection import Collection
from travelrec.domain.entities.country_images import CountryImages
from travelrec.domain.entities.permission import Permission
from travelrec.domain.entities.place import Place
from travelrec.domain.entities.recommendation import Recommendation
from travelrec.domain.entities.role import Role
from travelrec.domain.entities.user import User

__all__ = [
    "CityImages",
    "Collection",
    "CountryImages",
    "Permission",
    "Place",
    "Recommendation",
    "Role",
    "User",
]
