"""Domain value objects."""

from fleetacl.domain.value_objects.company_type import CompanyType
from fleetacl.domain.value_objects.permission_key import (
    PERMISSION_LABELS,
    WILDCARD,
    PermissionKey,
    parse_overrides,
    parse_role_keys,
)
from fleetacl.domain.value_objects.view_manage_access import ViewManageAccess

__all__ = [
    "PERMISSION_LABELS",
    "WILDCARD",
    "CompanyType",
    "PermissionKey",
    "ViewManageAccess",
    "parse_overrides",
    "parse_role_keys",
]
