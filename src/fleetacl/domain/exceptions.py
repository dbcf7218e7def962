"""Domain exceptions."""


class FleetACLError(Exception):
    """Base exception for FleetACL."""

    pass


class PermissionDenied(FleetACLError):
    """Acting user does not have permission for the requested action."""

    pass


class NotFound(FleetACLError):
    """Requested entity was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class ValidationError(FleetACLError):
    """Validation failed for input data."""

    pass
