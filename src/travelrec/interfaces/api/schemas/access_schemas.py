"""Role and permission request schemas."""

from uuid import UUID

from travelrec.application.dto.access_dto import PermissionInput, RoleInput
from travelrec.interfaces.api.schemas.common import RequestSchema, Text


class RoleRequest(RequestSchema):
    name: Text(2, 100)
    permissions: list[UUID]

    def to_input(self) -> RoleInput:
        return RoleInput(name=self.name, permission_ids=list(self.permissions))


class PermissionRequest(RequestSchema):
    name: Text(2, 100)
    description: Text(2, 255)

    def to_input(self) -> PermissionInput:
        return PermissionInput(name=self.name, description=self.description)
