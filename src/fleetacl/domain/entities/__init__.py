"""Domain entities."""

from fleetacl.domain.entities.role import Role, filter_visible_roles
from fleetacl.domain.entities.user import User

__all__ = [
    "Role",
    "User",
    "filter_visible_roles",
]
