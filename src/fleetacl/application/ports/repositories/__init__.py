"""Repository ports."""

from fleetacl.application.ports.repositories.role_repository import RoleRepository
from fleetacl.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "RoleRepository",
    "UserRepository",
]
