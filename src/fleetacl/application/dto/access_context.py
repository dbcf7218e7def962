"""Access context DTO - the snapshot permission evaluation runs against."""

from dataclasses import dataclass

from fleetacl.domain.entities import Role, User


@dataclass(frozen=True)
class AccessContext:
    """Current user and their resolved role. Either may be absent."""

    user: User | None = None
    role: Role | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
