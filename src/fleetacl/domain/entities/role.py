"""Role entity - named bundle of permission keys."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Role:
    """Role - permission keys (catalog keys or the wildcard) plus picker visibility."""

    id: str
    name: str
    permission_keys: list[str] = field(default_factory=list)
    description: str = ""
    is_active: bool = True
    hidden_for_companies: set[str] = field(default_factory=set)

    def is_visible_for_company(self, company_id: str) -> bool:
        """Active roles are offered to every company that has not hidden them."""
        if not self.is_active:
            return False
        return company_id not in self.hidden_for_companies


def filter_visible_roles(roles: Iterable[Role], company_id: str) -> list[Role]:
    """Roles a company's role picker may offer."""
    return [role for role in roles if role.is_visible_for_company(company_id)]
