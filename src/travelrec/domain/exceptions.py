"""Domain exceptions."""


class TravelRecError(Exception):
    """Base exception for travelrec."""

    pass


class ValidationError(TravelRecError):
    """Validation failed for input data."""

    pass


class AuthenticationFailed(TravelRecError):
    """Credentials did not match a registered user."""

    pass


class NotFound(TravelRecError):
    """Requested resource was not found."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found with id={entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class Conflict(TravelRecError):
    """A record with the same unique name already exists."""

    pass


class PermissionDenied(TravelRecError):
    """User does not have permission for the requested action."""

    pass


class IntegrityError(TravelRecError):
    """Delete blocked because the record is still referenced."""

    pass


class DanglingReference(TravelRecError):
    """Stored reference points at a record that no longer exists."""

    pass
