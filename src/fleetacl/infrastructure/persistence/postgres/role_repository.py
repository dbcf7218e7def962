"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from fleetacl.domain.entities import Role
from fleetacl.domain.value_objects import parse_role_keys

_COLUMNS = "id, name, description, permission_keys, is_active, hidden_for_companies"


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        description=r[2] or "",
        permission_keys=parse_role_keys(r[3] or [], strict=False),
        is_active=r[4],
        hidden_for_companies=set(r[5] or []),
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: str) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role ORDER BY name")
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def update(self, role: Role) -> None:
        """Update role permissions and visibility."""
        await self._conn.execute(
            "UPDATE role SET name=%s, description=%s, permission_keys=%s, "
            "is_active=%s, hidden_for_companies=%s WHERE id=%s",
            (
                role.name,
                role.description,
                Jsonb([str(k) for k in role.permission_keys]),
                role.is_active,
                Jsonb(sorted(role.hidden_for_companies)),
                role.id,
            ),
        )
