"""Unit tests for the permission catalog and boundary validation."""

import logging

import pytest

from fleetacl.domain.exceptions import ValidationError
from fleetacl.domain.value_objects import (
    PERMISSION_LABELS,
    WILDCARD,
    PermissionKey,
    parse_overrides,
    parse_role_keys,
)


def test_every_key_has_a_label() -> None:
    assert set(PERMISSION_LABELS) == set(PermissionKey)


def test_wildcard_is_not_a_catalog_key() -> None:
    assert WILDCARD not in {k.value for k in PermissionKey}


def test_keys_are_plain_strings() -> None:
    assert PermissionKey.ADMIN_USERS == "admin.users"
    assert str(PermissionKey.ADMIN_USERS_VIEW) == "admin.users.view"


def test_parse_known_key() -> None:
    assert PermissionKey.parse("assets.view") is PermissionKey.ASSETS_VIEW


@pytest.mark.parametrize("value", ["assets.View", "assets", "*", "", None, 3])
def test_parse_unknown_key_raises(value) -> None:
    with pytest.raises(ValidationError):
        PermissionKey.parse(value)


def test_parse_role_keys_accepts_wildcard_and_dedupes() -> None:
    keys = parse_role_keys(["assets.view", "*", "assets.view", "orders.view"])
    assert keys == [PermissionKey.ASSETS_VIEW, WILDCARD, PermissionKey.ORDERS_VIEW]


def test_parse_role_keys_strict_rejects_unknown() -> None:
    with pytest.raises(ValidationError, match="admin.everything"):
        parse_role_keys(["assets.view", "admin.everything"])


def test_parse_role_keys_lenient_drops_unknown(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        keys = parse_role_keys(["assets.view", "legacy.key"], strict=False)
    assert keys == [PermissionKey.ASSETS_VIEW]
    assert "Dropping unknown role permission key" in caplog.text


def test_parse_overrides_strict() -> None:
    result = parse_overrides({"admin.users": False, "assets.add": True})
    assert result == {PermissionKey.ADMIN_USERS: False, PermissionKey.ASSETS_ADD: True}


@pytest.mark.parametrize(
    "mapping",
    [{"admin.unknown": True}, {"admin.users": "yes"}, {"admin.users": 1}, {"*": True}],
)
def test_parse_overrides_strict_rejects_invalid(mapping) -> None:
    with pytest.raises(ValidationError):
        parse_overrides(mapping)


def test_parse_overrides_lenient_keeps_valid_entries() -> None:
    result = parse_overrides({"admin.users": True, "admin.unknown": True, "assets.add": None}, strict=False)
    assert result == {PermissionKey.ADMIN_USERS: True}
