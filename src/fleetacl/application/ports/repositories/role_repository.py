"""Role repository port."""

from typing import Protocol

from fleetacl.domain.entities import Role


class RoleRepository(Protocol):
    """Port for the role store."""

    async def get_by_id(self, role_id: str) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def update(self, role: Role) -> None: ...
