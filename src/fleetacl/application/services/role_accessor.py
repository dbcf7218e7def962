"""Role accessor - resolves a role id to its Role, failing closed."""

import logging

from fleetacl.application.services.role_cache import RoleCache
from fleetacl.domain.entities import Role

logger = logging.getLogger(__name__)


class RoleAccessor:
    """Looks roles up through the unit of work, caching hits.

    A missing role and a failing role store both resolve to None, which the
    evaluator treats as "no role-derived permissions".
    """

    def __init__(self, unit_of_work_factory: type, cache: RoleCache) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache = cache

    async def get_role(self, role_id: str | None) -> Role | None:
        """Return the role for role_id, or None if absent or unavailable."""
        if not role_id:
            return None

        cached = self._cache.get(role_id)
        if cached is not None:
            return cached

        generation = self._cache.generation

        try:
            async with self._uow_factory() as uow:
                role = await uow.roles.get_by_id(role_id)
        except Exception:
            logger.exception("Role lookup failed", extra={"role_id": role_id})
            return None

        if role is not None:
            self._cache.put(role, generation=generation)
        return role

    def invalidate(self, role_id: str) -> None:
        """Drop one role so its next lookup hits the store."""
        self._cache.invalidate(role_id)

    def clear_role_cache(self) -> None:
        """Drop every cached role."""
        self._cache.clear()
