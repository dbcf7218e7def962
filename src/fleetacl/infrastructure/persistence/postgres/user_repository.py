"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from fleetacl.domain.entities import User
from fleetacl.domain.value_objects import parse_overrides

_COLUMNS = (
    "id, role_id, is_global, permission_overrides, company_id, email, "
    "first_name, last_name, is_active"
)


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        role_id=r[1],
        is_global=r[2],
        permission_overrides=parse_overrides(r[3] or {}, strict=False),
        company_id=r[4],
        email=r[5],
        first_name=r[6] or "",
        last_name=r[7] or "",
        is_active=r[8],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_user(r)

    async def update(self, user: User) -> None:
        """Update role assignment, global flag and overrides."""
        await self._conn.execute(
            "UPDATE app_user SET role_id=%s, is_global=%s, permission_overrides=%s "
            "WHERE id=%s",
            (
                user.role_id,
                user.is_global,
                Jsonb({str(k): v for k, v in user.permission_overrides.items()}),
                user.id,
            ),
        )
