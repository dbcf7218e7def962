"""User entity - authenticated or contact-only principal."""

from dataclasses import dataclass, field

from fleetacl.domain.value_objects import PermissionKey


@dataclass
class User:
    """User - references exactly one role; overrides layer above the role's grants."""

    id: str
    role_id: str
    is_global: bool = False
    permission_overrides: dict[PermissionKey, bool] = field(default_factory=dict)
    company_id: str | None = None
    email: str | None = None
    first_name: str = ""
    last_name: str = ""
    is_active: bool = True
