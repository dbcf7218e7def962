"""Unit tests for role visibility."""

from fleetacl.domain.entities import filter_visible_roles

from tests.conftest import make_role


def test_active_role_visible_everywhere() -> None:
    role = make_role()
    assert role.is_visible_for_company("c1") is True


def test_inactive_role_hidden_everywhere() -> None:
    role = make_role(is_active=False)
    assert role.is_visible_for_company("c1") is False


def test_role_hidden_for_one_company() -> None:
    role = make_role(hidden_for_companies={"c1"})
    assert role.is_visible_for_company("c1") is False
    assert role.is_visible_for_company("c2") is True


def test_filter_visible_roles() -> None:
    roles = [
        make_role("r1"),
        make_role("r2", is_active=False),
        make_role("r3", hidden_for_companies={"c1"}),
    ]
    assert [r.id for r in filter_visible_roles(roles, "c1")] == ["r1"]
    assert [r.id for r in filter_visible_roles(roles, "c2")] == ["r1", "r3"]
