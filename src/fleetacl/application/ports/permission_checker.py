"""Permission checker port - authorization for the acting user."""

from collections.abc import Iterable
from typing import Protocol

from fleetacl.domain.value_objects import PermissionKey


class PermissionChecker(Protocol):
    """Port for checking whether a user holds permission keys."""

    async def check(self, user_id: str | None, permission: PermissionKey) -> bool: ...

    async def check_any(
        self, user_id: str | None, permissions: Iterable[PermissionKey]
    ) -> bool: ...
