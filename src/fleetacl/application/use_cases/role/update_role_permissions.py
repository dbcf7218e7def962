"""Update role permissions use case."""

import logging
from collections.abc import Iterable

from fleetacl.application.ports import PermissionChecker
from fleetacl.application.services.role_accessor import RoleAccessor
from fleetacl.domain.entities import Role
from fleetacl.domain.exceptions import NotFound, PermissionDenied
from fleetacl.domain.value_objects import PermissionKey, parse_role_keys

logger = logging.getLogger(__name__)


class UpdateRolePermissionsUseCase:
    """Replace a role's permission keys and drop its cached copy."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        role_accessor: RoleAccessor,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._role_accessor = role_accessor

    async def execute(
        self, actor_id: str, role_id: str, permission_keys: Iterable[object]
    ) -> Role:
        """Validate keys strictly (catalog or wildcard) and persist them."""
        if not await self._permission_checker.check(actor_id, PermissionKey.ADMIN_ROLES):
            logger.info("Role update denied", extra={"actor_id": actor_id, "role_id": role_id})
            raise PermissionDenied("User does not have access to manage roles")

        keys = parse_role_keys(permission_keys)

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise NotFound("Role", role_id)
            role.permission_keys = keys
            await uow.roles.update(role)

        self._role_accessor.invalidate(role_id)
        return role
