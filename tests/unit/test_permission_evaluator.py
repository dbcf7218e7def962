"""Unit tests for the permission evaluator."""

import pytest

from fleetacl.domain.services.permission_evaluator import (
    derive_view_manage_split,
    effective_permissions,
    evaluate,
    evaluate_multiple,
    has_all,
    has_any,
)
from fleetacl.domain.value_objects import WILDCARD, PermissionKey

from tests.conftest import make_role, make_user

P = PermissionKey
ALL_KEYS = list(PermissionKey)


# --- Precedence ---


def test_no_user_is_denied() -> None:
    """No current user denies everything, even with a wildcard role."""
    role = make_role(permission_keys=[WILDCARD])
    assert evaluate(None, role, P.ADMIN_USERS) is False


@pytest.mark.parametrize("key", ALL_KEYS)
def test_global_user_granted_even_when_overridden_false(key: PermissionKey) -> None:
    """Global flag dominates explicit deny overrides and a missing role."""
    user = make_user(is_global=True, overrides={key: False})
    assert evaluate(user, None, key) is True
    assert evaluate(user, make_role(permission_keys=[]), key) is True


@pytest.mark.parametrize("role_keys", [[], [P.ADMIN_ROLES], [WILDCARD]])
def test_override_wins_over_role(role_keys: list[str]) -> None:
    """An override returns its boolean whatever the role holds."""
    role = make_role(permission_keys=role_keys)
    granted = make_user(overrides={P.ADMIN_ROLES: True})
    denied = make_user(overrides={P.ADMIN_ROLES: False})
    assert evaluate(granted, role, P.ADMIN_ROLES) is True
    assert evaluate(denied, role, P.ADMIN_ROLES) is False


def test_override_applies_without_role() -> None:
    user = make_user(overrides={P.ASSETS_VIEW: True})
    assert evaluate(user, None, P.ASSETS_VIEW) is True
    assert evaluate(user, None, P.ASSETS_EDIT) is False


@pytest.mark.parametrize("key", ALL_KEYS)
def test_wildcard_grants_every_key(key: PermissionKey) -> None:
    role = make_role(permission_keys=[WILDCARD])
    assert evaluate(make_user(), role, key) is True


def test_implicit_deny_for_key_not_in_role() -> None:
    role = make_role(permission_keys=[P.ASSETS_VIEW, P.ORDERS_VIEW])
    assert evaluate(make_user(), role, P.ASSETS_DELETE) is False


def test_missing_role_fails_closed() -> None:
    assert evaluate(make_user(), None, P.ASSETS_VIEW) is False


def test_match_is_exact_not_prefix() -> None:
    """admin.users does not imply admin.users.view or the reverse."""
    role = make_role(permission_keys=[P.ADMIN_USERS])
    assert evaluate(make_user(), role, P.ADMIN_USERS_VIEW) is False
    role = make_role(permission_keys=[P.ADMIN_USERS_VIEW])
    assert evaluate(make_user(), role, P.ADMIN_USERS) is False


def test_role_keys_as_plain_strings_match_catalog_members() -> None:
    role = make_role(permission_keys=["admin.users"])
    assert evaluate(make_user(), role, P.ADMIN_USERS) is True


# --- Scenarios ---


def test_scenario_role_key_granted_other_denied() -> None:
    user = make_user(role_id="r1")
    r1 = make_role("r1", [P.ADMIN_USERS])
    assert evaluate(user, r1, P.ADMIN_USERS) is True
    assert evaluate(user, r1, P.ADMIN_ROLES) is False


def test_scenario_override_grants_missing_role_key() -> None:
    user = make_user(role_id="r1", overrides={P.ADMIN_ROLES: True})
    r1 = make_role("r1", [P.ADMIN_USERS])
    assert evaluate(user, r1, P.ADMIN_ROLES) is True


def test_scenario_override_revokes_from_wildcard_role() -> None:
    user = make_user(role_id="r2", overrides={P.ADMIN_USERS: False})
    r2 = make_role("r2", [WILDCARD])
    assert evaluate(user, r2, P.ADMIN_USERS) is False
    assert evaluate(user, r2, P.ADMIN_ROLES) is True


def test_scenario_role_not_found_denies_everything() -> None:
    user = make_user(role_id="missing")
    assert not any(evaluate(user, None, key) for key in ALL_KEYS)


# --- View/manage split ---


def test_split_view_only() -> None:
    role = make_role(permission_keys=[P.ADMIN_USERS_VIEW])
    access = derive_view_manage_split(make_user(), role, P.ADMIN_USERS_VIEW, P.ADMIN_USERS)
    assert (access.can_view, access.can_manage, access.is_view_only) == (True, False, True)
    assert access.has_access is True


def test_split_manage_implies_view() -> None:
    role = make_role(permission_keys=[P.ADMIN_USERS])
    access = derive_view_manage_split(make_user(), role, P.ADMIN_USERS_VIEW, P.ADMIN_USERS)
    assert (access.can_view, access.can_manage, access.is_view_only) == (True, True, False)


def test_split_no_access_is_not_view_only() -> None:
    role = make_role(permission_keys=[P.ASSETS_VIEW])
    access = derive_view_manage_split(make_user(), role, P.ADMIN_USERS_VIEW, P.ADMIN_USERS)
    assert (access.can_view, access.can_manage, access.is_view_only) == (False, False, False)
    assert access.has_access is False


@pytest.mark.parametrize(
    "user, role",
    [
        (None, None),
        (make_user(), None),
        (make_user(), make_role(permission_keys=[P.ADMIN_ROLES])),
        (make_user(), make_role(permission_keys=[WILDCARD])),
        (make_user(overrides={P.ADMIN_ROLES_VIEW: False}), make_role(permission_keys=[P.ADMIN_ROLES])),
        (make_user(overrides={P.ADMIN_ROLES: False}), make_role(permission_keys=[WILDCARD])),
        (make_user(is_global=True), None),
    ],
)
def test_split_flags_are_consistent(user, role) -> None:
    access = derive_view_manage_split(user, role, P.ADMIN_ROLES_VIEW, P.ADMIN_ROLES)
    if access.can_manage:
        assert access.can_view
    assert not (access.is_view_only and access.can_manage)


def test_split_override_revoking_manage_leaves_view_from_wildcard() -> None:
    user = make_user(overrides={P.ADMIN_ROLES: False})
    access = derive_view_manage_split(
        user, make_role(permission_keys=[WILDCARD]), P.ADMIN_ROLES_VIEW, P.ADMIN_ROLES
    )
    assert access.is_view_only is True


# --- Aggregates ---


def test_evaluate_multiple_is_per_key() -> None:
    role = make_role(permission_keys=[P.ASSETS_VIEW])
    user = make_user(overrides={P.ASSETS_ADD: True})
    result = evaluate_multiple(user, role, [P.ASSETS_VIEW, P.ASSETS_ADD, P.ASSETS_DELETE])
    assert result == {P.ASSETS_VIEW: True, P.ASSETS_ADD: True, P.ASSETS_DELETE: False}


def test_evaluate_multiple_empty() -> None:
    assert evaluate_multiple(make_user(), None, []) == {}


def test_has_any_and_has_all() -> None:
    role = make_role(permission_keys=[P.ORDERS_VIEW, P.ORDERS_CREATE])
    user = make_user()
    assert has_any(user, role, [P.ORDERS_CANCEL, P.ORDERS_VIEW]) is True
    assert has_all(user, role, [P.ORDERS_CANCEL, P.ORDERS_VIEW]) is False
    assert has_all(user, role, [P.ORDERS_CREATE, P.ORDERS_VIEW]) is True
    assert has_any(user, role, [P.ORDERS_CANCEL]) is False


@pytest.mark.parametrize(
    "user, role",
    [
        (None, None),
        (make_user(), None),
        (make_user(is_global=True), None),
        (make_user(), make_role(permission_keys=[WILDCARD])),
    ],
)
def test_empty_key_list_aggregates(user, role) -> None:
    """No keys: has_any is False, has_all is vacuously True."""
    assert has_any(user, role, []) is False
    assert has_all(user, role, []) is True


def test_effective_permissions_keeps_input_order() -> None:
    role = make_role(permission_keys=[P.REPORTS_EXPORT, P.REPORTS_DAILY])
    keys = [P.REPORTS_DAILY, P.REPORTS_MONTHLY, P.REPORTS_EXPORT]
    assert effective_permissions(make_user(), role, keys) == [P.REPORTS_DAILY, P.REPORTS_EXPORT]


def test_aggregates_accept_generators() -> None:
    role = make_role(permission_keys=[P.SECURITY_IN])
    keys = (k for k in [P.SECURITY_IN, P.SECURITY_OUT])
    assert has_any(make_user(), role, keys) is True
