"""Pytest fixtures for FleetACL tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from fleetacl.application.services.role_accessor import RoleAccessor
from fleetacl.application.services.role_cache import RoleCache
from fleetacl.domain.entities import Role, User
from fleetacl.domain.value_objects import PermissionKey
from fleetacl.infrastructure.permission.permission_checker import FleetPermissionChecker


# --- Builders ---


def make_role(
    role_id: str = "r1",
    permission_keys: list[str] | None = None,
    **kwargs,
) -> Role:
    return Role(
        id=role_id,
        name=kwargs.pop("name", role_id),
        permission_keys=list(permission_keys or []),
        **kwargs,
    )


def make_user(
    user_id: str = "u1",
    role_id: str = "r1",
    is_global: bool = False,
    overrides: dict[PermissionKey, bool] | None = None,
    **kwargs,
) -> User:
    return User(
        id=user_id,
        role_id=role_id,
        is_global=is_global,
        permission_overrides=dict(overrides or {}),
        **kwargs,
    )


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository. Set `error` to make lookups fail."""

    def __init__(self) -> None:
        self._by_id: dict[str, Role] = {}
        self.get_calls = 0
        self.error: Exception | None = None

    async def get_by_id(self, role_id: str) -> Role | None:
        self.get_calls += 1
        if self.error:
            raise self.error
        return self._by_id.get(role_id)

    async def list_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.name)

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = role

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeUserRepository:
    """In-memory user repository. Set `error` to make lookups fail."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}
        self.error: Exception | None = None

    async def get_by_id(self, user_id: str) -> User | None:
        if self.error:
            raise self.error
        return self._by_id.get(user_id)

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user

    def add_user(self, user: User) -> None:
        """Helper to add user for tests."""
        self._by_id[user.id] = user


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.roles = FakeRoleRepository()
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def factory_for(uow: FakeUnitOfWork):
    """UoW factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory():
        yield uow
        await uow.commit()

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the shared fake_uow."""
    return factory_for(fake_uow)


@pytest.fixture
def role_cache() -> RoleCache:
    return RoleCache()


@pytest.fixture
def role_accessor(uow_factory, role_cache: RoleCache) -> RoleAccessor:
    return RoleAccessor(uow_factory, role_cache)


@pytest.fixture
def permission_checker(uow_factory, role_accessor: RoleAccessor) -> FleetPermissionChecker:
    return FleetPermissionChecker(uow_factory, role_accessor)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - grants everything by default."""
    mock = AsyncMock()
    mock.check.return_value = True
    mock.check_any.return_value = True
    return mock
