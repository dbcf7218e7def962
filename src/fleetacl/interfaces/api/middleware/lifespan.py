"""Lifespan middleware - owns the pool and role cache across the ASGI lifespan."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from fleetacl.application.services.role_accessor import RoleAccessor

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the pool on startup; closes it and drops cached roles on shutdown."""

    def __init__(self, pool: AsyncConnectionPool, role_accessor: RoleAccessor) -> None:
        self._pool = pool
        self._role_accessor = role_accessor

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open()
        logger.info("Connection pool opened")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        self._role_accessor.clear_role_cache()
        await self._pool.close()
        logger.info("Connection pool closed")
