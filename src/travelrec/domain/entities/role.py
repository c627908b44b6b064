"""Role entity for RBAC."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permissions (admin, editor, user)."""

    id: UUID
    name: str
    permission_ids: list[UUID] = field(default_factory=list)
