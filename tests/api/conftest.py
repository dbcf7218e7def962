"""Fixtures for API tests."""

import falcon.asgi
import pytest
from falcon.testing import TestClient

from fleetacl.domain.value_objects import WILDCARD, PermissionKey
from fleetacl.interfaces.api.resources.health import HealthResource
from fleetacl.main import add_routes

from tests.conftest import FakeUnitOfWork, make_role, make_user

P = PermissionKey


class _TestUser:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id


class AuthBypassMiddleware:
    """Takes the current user from X-Test-User; no header means anonymous."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = _TestUser(user_id) if user_id else None


@pytest.fixture
def seeded_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Roles and users covering wildcard, view-only, overrides and global."""
    fake_uow.roles.add_role(make_role("r_admin", [WILDCARD], name="Admin"))
    fake_uow.roles.add_role(
        make_role("r_viewer", [P.ADMIN_ROLES_VIEW, P.ADMIN_USERS_VIEW], name="Viewer")
    )
    fake_uow.roles.add_role(
        make_role("r_ops", [P.ORDERS_VIEW], name="Ops", hidden_for_companies={"c2"})
    )
    fake_uow.users.add_user(make_user("admin", role_id="r_admin"))
    fake_uow.users.add_user(make_user("viewer", role_id="r_viewer", company_id="c1"))
    fake_uow.users.add_user(
        make_user("ops", role_id="r_ops", company_id="c2", overrides={P.ORDERS_CREATE: True})
    )
    fake_uow.users.add_user(make_user("root", role_id="r_missing", is_global=True))
    return fake_uow


@pytest.fixture
def app(seeded_uow, uow_factory, permission_checker, role_accessor):
    """Falcon ASGI app with every route, backed by fakes."""
    app = falcon.asgi.App(middleware=[AuthBypassMiddleware()])
    return add_routes(app, uow_factory, permission_checker, role_accessor, HealthResource())


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


def as_user(user_id: str) -> dict[str, str]:
    return {"X-Test-User": user_id}
