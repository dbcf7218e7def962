"""Roles API resources."""

import falcon.asgi

from fleetacl.application.use_cases.role.clear_role_cache import ClearRoleCacheUseCase
from fleetacl.application.use_cases.role.list_visible_roles import ListVisibleRolesUseCase
from fleetacl.application.use_cases.role.update_role_permissions import (
    UpdateRolePermissionsUseCase,
)
from fleetacl.domain.entities import Role
from fleetacl.domain.exceptions import NotFound, PermissionDenied, ValidationError


def role_to_dict(role: Role) -> dict:
    return {
        "id": role.id,
        "name": role.name,
        "description": role.description,
        "permission_keys": [str(k) for k in role.permission_keys],
        "is_active": role.is_active,
        "hidden_for_companies": sorted(role.hidden_for_companies),
    }


class RolesResource:
    """GET /v1/roles[?company_id=..] - roles visible to a company's role picker."""

    def __init__(self, list_visible_roles: ListVisibleRolesUseCase) -> None:
        self._list = list_visible_roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            roles = await self._list.execute(user.user_id, req.get_param("company_id"))
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200


class RolePermissionsResource:
    """PUT /v1/roles/{role_id}/permissions - replace a role's permission keys."""

    def __init__(self, update_role_permissions: UpdateRolePermissionsUseCase) -> None:
        self._update = update_role_permissions

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        keys = body.get("permission_keys") if isinstance(body, dict) else None
        if not isinstance(keys, list):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permission_keys must be a list"}
            return

        try:
            role = await self._update.execute(user.user_id, role_id, keys)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200


class RoleCacheResource:
    """POST /v1/roles/cache/clear - drop cached roles after out-of-band edits."""

    def __init__(self, clear_role_cache: ClearRoleCacheUseCase) -> None:
        self._clear = clear_role_cache

    async def on_post_clear(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._clear.execute(user.user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.status = falcon.HTTP_204
