"""Promote or demote a global admin."""

from fleetacl.application.ports import PermissionChecker
from fleetacl.domain.entities import User
from fleetacl.domain.exceptions import NotFound, PermissionDenied
from fleetacl.domain.value_objects import PermissionKey


class SetGlobalFlagUseCase:
    """Toggle the flag that bypasses every permission check."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, is_global: bool) -> User:
        has_access = await self._permission_checker.check(
            actor_id, PermissionKey.ADMIN_USERS_MANAGE_GLOBAL_ADMINS
        )
        if not has_access:
            raise PermissionDenied("User does not have access to manage global admins")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            user.is_global = is_global
            await uow.users.update(user)
            return user
