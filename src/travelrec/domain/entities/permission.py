"""Permission entity - atomic named capability."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Permission:
    """Permission - capability name with a human readable description."""

    id: UUID
    name: str
    description: str
