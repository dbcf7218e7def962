"""Application ports - interfaces for external adapters."""

from fleetacl.application.ports.permission_checker import PermissionChecker
from fleetacl.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
