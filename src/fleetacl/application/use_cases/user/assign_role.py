"""Assign role use case."""

import logging

from fleetacl.application.ports import PermissionChecker
from fleetacl.domain.entities import User
from fleetacl.domain.exceptions import NotFound, PermissionDenied, ValidationError
from fleetacl.domain.value_objects import PermissionKey

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """Point a user at a different role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, role_id: str) -> User:
        """Assign role to user. Actor must manage users; role must be visible to the user's company."""
        if not await self._permission_checker.check(actor_id, PermissionKey.ADMIN_USERS):
            logger.info("Role assignment denied", extra={"actor_id": actor_id})
            raise PermissionDenied("User does not have access to manage users")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)

            if not role.is_active:
                raise ValidationError(f"Role {role_id} is inactive")
            if user.company_id and not role.is_visible_for_company(user.company_id):
                raise ValidationError(
                    f"Role {role_id} is not available for company {user.company_id}"
                )

            user.role_id = role.id
            await uow.users.update(user)
            return user
