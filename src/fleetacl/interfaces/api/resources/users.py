"""User administration resources: role assignment, global flag, overrides."""

import falcon.asgi

from fleetacl.application.use_cases.user.assign_role import AssignRoleUseCase
from fleetacl.application.use_cases.user.set_global_flag import SetGlobalFlagUseCase
from fleetacl.application.use_cases.user.set_permission_override import (
    SetPermissionOverrideUseCase,
)
from fleetacl.domain.entities import User
from fleetacl.domain.exceptions import NotFound, PermissionDenied, ValidationError
from fleetacl.domain.value_objects import PermissionKey


def user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "role_id": user.role_id,
        "is_global": user.is_global,
        "company_id": user.company_id,
        "permission_overrides": {str(k): v for k, v in user.permission_overrides.items()},
    }


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - assign a role."""

    def __init__(self, assign_role: AssignRoleUseCase) -> None:
        self._assign = assign_role

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        role_id = body.get("role_id") if isinstance(body, dict) else None
        if not isinstance(role_id, str) or not role_id:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "role_id must be a non-empty string"}
            return

        try:
            user = await self._assign.execute(actor.user_id, user_id, role_id)
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

        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200


class UserGlobalResource:
    """PUT /v1/users/{user_id}/global - set or clear the global admin flag."""

    def __init__(self, set_global_flag: SetGlobalFlagUseCase) -> None:
        self._set_global = set_global_flag

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        is_global = body.get("is_global") if isinstance(body, dict) else None
        if not isinstance(is_global, bool):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "is_global must be a boolean"}
            return

        try:
            user = await self._set_global.execute(actor.user_id, user_id, is_global)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200


class UserOverrideResource:
    """PUT/DELETE /v1/users/{user_id}/overrides/{permission_key} - per-user exceptions."""

    def __init__(self, set_permission_override: SetPermissionOverrideUseCase) -> None:
        self._set_override = set_permission_override

    async def _apply(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_key: str,
        granted: bool | None,
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            key = PermissionKey.parse(permission_key)
            user = await self._set_override.execute(actor.user_id, user_id, key, granted)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_key: str,
    ) -> None:
        """Body: {"granted": true|false}."""
        body = await req.get_media()
        granted = body.get("granted") if isinstance(body, dict) else None
        if not isinstance(granted, bool):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "granted must be a boolean"}
            return
        await self._apply(req, resp, user_id, permission_key, granted)

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_key: str,
    ) -> None:
        """Remove the override so the role decides again."""
        await self._apply(req, resp, user_id, permission_key, None)
