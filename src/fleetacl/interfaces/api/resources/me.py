"""Current-user permission endpoints consumed by UI gating code."""

import falcon.asgi

from fleetacl.domain.exceptions import ValidationError
from fleetacl.domain.services import permission_evaluator
from fleetacl.domain.value_objects import PermissionKey
from fleetacl.infrastructure.permission.permission_checker import FleetPermissionChecker


def _parse_keys(raw: str | None) -> list[PermissionKey]:
    """Comma-separated keys from a query string; absent means the whole catalog."""
    if raw is None:
        return list(PermissionKey)
    return [PermissionKey.parse(k.strip()) for k in raw.split(",") if k.strip()]


class MePermissionsResource:
    """GET /v1/me/permissions - evaluate keys for the current user."""

    def __init__(self, permission_checker: FleetPermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Anonymous callers get every key denied, not an error."""
        try:
            keys = _parse_keys(req.get_param("keys"))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        user = getattr(req.context, "user", None)
        ctx = await self._permission_checker.load_context(user.user_id if user else None)
        results = permission_evaluator.evaluate_multiple(ctx.user, ctx.role, keys)

        resp.media = {
            "authenticated": ctx.is_authenticated,
            "is_global": bool(ctx.user and ctx.user.is_global),
            "role_id": ctx.role.id if ctx.role else None,
            "permissions": {str(k): v for k, v in results.items()},
            "has_any": any(results.values()),
            "has_all": all(results.values()),
        }
        resp.status = falcon.HTTP_200


class MeAccessResource:
    """GET /v1/me/access?view=..&manage=.. - view-only vs manage for one feature."""

    def __init__(self, permission_checker: FleetPermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            view_key = PermissionKey.parse(req.get_param("view", required=True))
            manage_key = PermissionKey.parse(req.get_param("manage", required=True))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        user = getattr(req.context, "user", None)
        ctx = await self._permission_checker.load_context(user.user_id if user else None)
        access = permission_evaluator.derive_view_manage_split(
            ctx.user, ctx.role, view_key, manage_key
        )
        resp.media = {
            "can_view": access.can_view,
            "can_manage": access.can_manage,
            "is_view_only": access.is_view_only,
        }
        resp.status = falcon.HTTP_200
