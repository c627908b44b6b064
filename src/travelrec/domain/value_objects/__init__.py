"""Domain value objects."""

from travelrec.domain.value_objects.image import Image
from travelrec.domain.value_objects.location import Location
from travelrec.domain.value_objects.match_strategy import MatchStrategy
from travelrec.domain.value_objects.permission_name import PermissionName
from travelrec.domain.value_objects.social import Social

__all__ = [
    "Image",
    "Location",
    "MatchStrategy",
    "PermissionName",
    "Social",
]
