"""Three-state capability derived from a view/manage key pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewManageAccess:
    """No access, view-only, or manage. can_manage implies can_view."""

    can_view: bool
    can_manage: bool
    is_view_only: bool

    @property
    def has_access(self) -> bool:
        return self.can_view
