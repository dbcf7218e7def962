"""Unit tests for domain exceptions."""

import pytest

from fleetacl.domain.exceptions import (
    FleetACLError,
    NotFound,
    PermissionDenied,
    ValidationError,
)


@pytest.mark.parametrize("exc", [PermissionDenied, NotFound, ValidationError])
def test_exceptions_inherit_base(exc: type) -> None:
    assert issubclass(exc, FleetACLError)


def test_not_found_message_and_fields() -> None:
    with pytest.raises(FleetACLError, match="Role not found: r9") as info:
        raise NotFound("Role", "r9")
    assert info.value.entity == "Role"
    assert info.value.identifier == "r9"


def test_exception_message_preserved() -> None:
    msg = "User does not have access to manage roles"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
