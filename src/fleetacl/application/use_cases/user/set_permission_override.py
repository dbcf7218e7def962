"""Set or clear a per-user permission override."""

import logging

from fleetacl.application.ports import PermissionChecker
from fleetacl.domain.entities import User
from fleetacl.domain.exceptions import NotFound, PermissionDenied
from fleetacl.domain.value_objects import PermissionKey

logger = logging.getLogger(__name__)


class SetPermissionOverrideUseCase:
    """Grant, deny, or reset one key for one user, above whatever their role says."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        user_id: str,
        permission: PermissionKey,
        granted: bool | None,
    ) -> User:
        """Set override to granted; None removes it so the role decides again."""
        has_access = await self._permission_checker.check(
            actor_id, PermissionKey.ADMIN_USERS_MANAGE_PERMISSIONS
        )
        if not has_access:
            logger.info("Permission override denied", extra={"actor_id": actor_id})
            raise PermissionDenied("User does not have access to manage permissions")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            if granted is None:
                user.permission_overrides.pop(permission, None)
            else:
                user.permission_overrides[permission] = granted
            await uow.users.update(user)
            return user
