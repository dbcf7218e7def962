"""In-process role cache, keyed by role id."""

from fleetacl.domain.entities import Role


class RoleCache:
    """Explicitly constructed cache of role lookups.

    Nothing invalidates entries automatically: role edits become visible once
    the entry is invalidated or the cache is cleared. Every invalidation bumps
    `generation`, and a put made with an older generation is dropped, so a
    lookup that started before an edit cannot store the pre-edit role.
    """

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        self._roles: dict[str, Role] = {}
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def get(self, role_id: str) -> Role | None:
        return self._roles.get(role_id)

    def put(self, role: Role, generation: int | None = None) -> bool:
        """Store role; False if caching is off or an invalidation happened since `generation`."""
        if not self._enabled:
            return False
        if generation is not None and generation != self._generation:
            return False
        self._roles[role.id] = role
        return True

    def invalidate(self, role_id: str) -> None:
        self._generation += 1
        self._roles.pop(role_id, None)

    def clear(self) -> None:
        self._generation += 1
        self._roles.clear()

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._roles
