"""Authorizer port - RBAC decision."""

from typing import Protocol

from travelrec.domain.value_objects import PermissionName


class Authorizer(Protocol):
    """Port for checking whether a user's role grants a permission."""

    async def is_allowed(self, user_id: str, permission: PermissionName) -> bool: ...
