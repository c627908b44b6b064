"""Permission names for RBAC."""

from enum import StrEnum


class PermissionName(StrEnum):
    """Capabilities a role can grant."""

    ASSIGN_ROLES = "user:assignRoles"
    MANAGE_PLACES = "content:managePlaces"
