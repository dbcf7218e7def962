"""Clear role cache use case."""

import logging

from fleetacl.application.ports import PermissionChecker
from fleetacl.application.services.role_accessor import RoleAccessor
from fleetacl.domain.exceptions import PermissionDenied
from fleetacl.domain.value_objects import PermissionKey

logger = logging.getLogger(__name__)


class ClearRoleCacheUseCase:
    """Make role edits made outside this service visible immediately."""

    def __init__(
        self,
        permission_checker: PermissionChecker,
        role_accessor: RoleAccessor,
    ) -> None:
        self._permission_checker = permission_checker
        self._role_accessor = role_accessor

    async def execute(self, actor_id: str) -> None:
        if not await self._permission_checker.check(actor_id, PermissionKey.ADMIN_ROLES):
            raise PermissionDenied("User does not have access to manage roles")
        self._role_accessor.clear_role_cache()
        logger.info("Role cache cleared", extra={"actor_id": actor_id})
