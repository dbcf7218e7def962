"""List roles visible to a company's role picker."""

from fleetacl.application.ports import PermissionChecker
from fleetacl.domain.entities import Role, filter_visible_roles
from fleetacl.domain.exceptions import PermissionDenied
from fleetacl.domain.value_objects import PermissionKey


class ListVisibleRolesUseCase:
    """Roles a company may assign: active and not hidden for that company."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, company_id: str | None = None) -> list[Role]:
        """Without company_id every role is returned (global role administration)."""
        has_access = await self._permission_checker.check_any(
            actor_id, [PermissionKey.ADMIN_ROLES, PermissionKey.ADMIN_ROLES_VIEW]
        )
        if not has_access:
            raise PermissionDenied("User does not have access to view roles")

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()

        if company_id is None:
            return roles
        return filter_visible_roles(roles, company_id)
