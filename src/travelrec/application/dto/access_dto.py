"""Role and permission DTOs."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class RoleInput:
    """Input for creating or updating a role."""

    name: str
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass
class PermissionInput:
    """Input for creating a permission."""

    name: str
    description: str
