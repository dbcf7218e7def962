"""Permission evaluation - the single authority for access decisions.

Authority, strongest first:
global flag > per-user override > role wildcard > role key > implicit deny.

Every function here is pure over a (user, role) snapshot. Absent inputs are
data, not errors: no user, no role, or a missing override all resolve to a
boolean.
"""

from collections.abc import Iterable

from fleetacl.domain.entities import Role, User
from fleetacl.domain.value_objects import WILDCARD, PermissionKey, ViewManageAccess


def evaluate(user: User | None, role: Role | None, permission: PermissionKey) -> bool:
    """Return whether user (holding role) is granted permission."""
    if user is None:
        return False

    if user.is_global:
        return True

    # Overrides may revoke a key from a wildcard role, so they run first.
    overrides = user.permission_overrides
    if overrides and permission in overrides:
        return overrides[permission]

    if role is None:
        return False

    if WILDCARD in role.permission_keys:
        return True

    return permission in role.permission_keys


def evaluate_multiple(
    user: User | None, role: Role | None, permissions: Iterable[PermissionKey]
) -> dict[PermissionKey, bool]:
    """Evaluate each key independently."""
    return {permission: evaluate(user, role, permission) for permission in permissions}


def has_any(
    user: User | None, role: Role | None, permissions: Iterable[PermissionKey]
) -> bool:
    """True if at least one key is granted. False for no keys."""
    return any(evaluate(user, role, permission) for permission in permissions)


def has_all(
    user: User | None, role: Role | None, permissions: Iterable[PermissionKey]
) -> bool:
    """True if every key is granted. True for no keys."""
    return all(evaluate(user, role, permission) for permission in permissions)


def effective_permissions(
    user: User | None, role: Role | None, permissions: Iterable[PermissionKey]
) -> list[PermissionKey]:
    """Granted subset of permissions, in input order."""
    return [permission for permission in permissions if evaluate(user, role, permission)]


def derive_view_manage_split(
    user: User | None,
    role: Role | None,
    view_key: PermissionKey,
    manage_key: PermissionKey,
) -> ViewManageAccess:
    """Derive view-only vs manage access for a feature's key pair.

    Manage implies view. A user holding neither key gets all three flags
    False, which means no access rather than view-only.
    """
    can_manage = evaluate(user, role, manage_key)
    can_view = can_manage or evaluate(user, role, view_key)
    return ViewManageAccess(
        can_view=can_view,
        can_manage=can_manage,
        is_view_only=can_view and not can_manage,
    )
