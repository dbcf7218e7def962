"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from fleetacl import __version__
from fleetacl.application.services.role_accessor import RoleAccessor
from fleetacl.application.services.role_cache import RoleCache
from fleetacl.application.use_cases.role.clear_role_cache import ClearRoleCacheUseCase
from fleetacl.application.use_cases.role.list_visible_roles import ListVisibleRolesUseCase
from fleetacl.application.use_cases.role.update_role_permissions import (
    UpdateRolePermissionsUseCase,
)
from fleetacl.application.use_cases.user.assign_role import AssignRoleUseCase
from fleetacl.application.use_cases.user.set_global_flag import SetGlobalFlagUseCase
from fleetacl.application.use_cases.user.set_permission_override import (
    SetPermissionOverrideUseCase,
)
from fleetacl.config import get_settings
from fleetacl.infrastructure.auth.keycloak_provider import KeycloakProvider
from fleetacl.infrastructure.permission.permission_checker import FleetPermissionChecker
from fleetacl.infrastructure.persistence.postgres.connection import create_pool
from fleetacl.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from fleetacl.interfaces.api.middleware.auth import AuthMiddleware
from fleetacl.interfaces.api.middleware.cors import CORSMiddleware
from fleetacl.interfaces.api.middleware.lifespan import LifespanMiddleware
from fleetacl.interfaces.api.resources.health import HealthResource
from fleetacl.interfaces.api.resources.me import MeAccessResource, MePermissionsResource
from fleetacl.interfaces.api.resources.permissions import PermissionCatalogResource
from fleetacl.interfaces.api.resources.roles import (
    RoleCacheResource,
    RolePermissionsResource,
    RolesResource,
)
from fleetacl.interfaces.api.resources.users import (
    UserGlobalResource,
    UserOverrideResource,
    UserRoleResource,
)
from fleetacl.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"FleetACL v{__version__}")


def add_routes(
    app: falcon.asgi.App,
    uow_factory: object,
    permission_checker: FleetPermissionChecker,
    role_accessor: RoleAccessor,
    health_resource: HealthResource,
) -> falcon.asgi.App:
    """Wire use cases into resources and register every route."""
    assign_role = AssignRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    set_permission_override = SetPermissionOverrideUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    set_global_flag = SetGlobalFlagUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_role_permissions = UpdateRolePermissionsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        role_accessor=role_accessor,
    )
    list_visible_roles = ListVisibleRolesUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    clear_role_cache = ClearRoleCacheUseCase(
        permission_checker=permission_checker,
        role_accessor=role_accessor,
    )

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/me/permissions", MePermissionsResource(permission_checker))
    app.add_route("/v1/me/access", MeAccessResource(permission_checker))
    app.add_route("/v1/permissions", PermissionCatalogResource())
    app.add_route("/v1/roles", RolesResource(list_visible_roles))
    app.add_route("/v1/roles/cache/clear", RoleCacheResource(clear_role_cache), suffix="clear")
    app.add_route(
        "/v1/roles/{role_id}/permissions",
        RolePermissionsResource(update_role_permissions),
    )
    app.add_route("/v1/users/{user_id}/role", UserRoleResource(assign_role))
    app.add_route("/v1/users/{user_id}/global", UserGlobalResource(set_global_flag))
    app.add_route(
        "/v1/users/{user_id}/overrides/{permission_key}",
        UserOverrideResource(set_permission_override),
    )
    return app


def create_fleetacl_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all requests are anonymous")

    role_cache = RoleCache(enabled=settings.role_cache_enabled)
    role_accessor = RoleAccessor(uow_factory, role_cache)
    permission_checker = FleetPermissionChecker(uow_factory, role_accessor)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            LifespanMiddleware(pool, role_accessor),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.error(
            "Unhandled error", exc_info=ex, extra={"path": req.path, "method": req.method}
        )
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    return add_routes(app, uow_factory, permission_checker, role_accessor, HealthResource(pool))


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_fleetacl_app(), host="0.0.0.0", port=8000)
