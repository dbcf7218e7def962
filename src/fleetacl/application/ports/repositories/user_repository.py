"""User repository port."""

from typing import Protocol

from fleetacl.domain.entities import User


class UserRepository(Protocol):
    """Port for the user store."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def update(self, user: User) -> None: ...
