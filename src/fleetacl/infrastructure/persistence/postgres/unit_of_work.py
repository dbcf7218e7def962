"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from fleetacl.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from fleetacl.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """User and role repositories sharing one pooled connection."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self._users = PostgresUserRepository(conn)
        self._roles = PostgresRoleRepository(conn)

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(
    pool: AsyncConnectionPool,
) -> Callable[[], AbstractAsyncContextManager[PostgresUnitOfWork]]:
    """Factory of units of work: commit on clean exit, roll back on any error."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                logger.debug("Rolling back unit of work")
                await uow.rollback()
                raise
            await uow.commit()

    return factory
