"""Permission checker implementation - evaluates against stored users and roles."""

import logging
from collections.abc import Iterable

from fleetacl.application.dto.access_context import AccessContext
from fleetacl.application.services.role_accessor import RoleAccessor
from fleetacl.domain.services import permission_evaluator
from fleetacl.domain.value_objects import PermissionKey

logger = logging.getLogger(__name__)


class FleetPermissionChecker:
    """Loads the user's snapshot and runs the pure evaluator over it."""

    def __init__(self, unit_of_work_factory: type, role_accessor: RoleAccessor) -> None:
        self._uow_factory = unit_of_work_factory
        self._role_accessor = role_accessor

    async def load_context(self, user_id: str | None) -> AccessContext:
        """Resolve user and role. Unknown users and user-store faults get an empty (deny-all) context."""
        if not user_id:
            return AccessContext()

        try:
            async with self._uow_factory() as uow:
                user = await uow.users.get_by_id(user_id)
        except Exception:
            logger.exception("User lookup failed", extra={"user_id": user_id})
            return AccessContext()
        if not user:
            return AccessContext()

        # Global users never consult the role.
        if user.is_global:
            return AccessContext(user=user)

        role = await self._role_accessor.get_role(user.role_id)
        return AccessContext(user=user, role=role)

    async def check(self, user_id: str | None, permission: PermissionKey) -> bool:
        """Check if user has permission."""
        ctx = await self.load_context(user_id)
        return permission_evaluator.evaluate(ctx.user, ctx.role, permission)

    async def check_any(
        self, user_id: str | None, permissions: Iterable[PermissionKey]
    ) -> bool:
        """Check if user has at least one of permissions."""
        ctx = await self.load_context(user_id)
        return permission_evaluator.has_any(ctx.user, ctx.role, permissions)
