"""Pytest fixtures for mdbiam tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
from structlog.testing import capture_logs

from mdbiam.domain.entities import Privilege, Role, RoleAssignment
from mdbiam.domain.exceptions import SessionError

# Subset of the built-in readWrite role actions.
READ_WRITE_ACTIONS = (
    "changeStream",
    "collStats",
    "convertToCapped",
    "createCollection",
    "createIndex",
    "dbHash",
    "dbStats",
    "dropCollection",
    "dropIndex",
    "find",
    "insert",
    "killCursors",
    "listCollections",
    "listIndexes",
    "planCacheRead",
    "remove",
    "renameCollectionSameDB",
    "update",
)


# --- Fake cluster ---


class FakeAdminSession:
    """In-memory AdminSession backed by a FakeCluster."""

    def __init__(self, cluster: FakeCluster) -> None:
        self._cluster = cluster

    async def list_database_names(self) -> list[str]:
        if self._cluster.fail_list_databases:
            raise SessionError("listDatabases failed: not authorized")
        return list(self._cluster.databases)

    async def get_user_roles(self, db_name: str, username: str) -> list[RoleAssignment] | None:
        self._cluster.users_info_calls.append(db_name)
        if db_name in self._cluster.failing_databases:
            raise SessionError(f"usersInfo failed on {db_name}")
        if db_name in self._cluster.malformed_databases:
            raise KeyError("roles")
        return self._cluster.users.get(db_name, {}).get(username)

    async def get_roles_info(self, role_name: str) -> list[Role]:
        if role_name in self._cluster.failing_roles:
            raise SessionError(f"rolesInfo failed for {role_name}")
        return self._cluster.roles.get(role_name, [])

    async def get_authenticated_users(self) -> list[str]:
        if self._cluster.fail_connection_status:
            raise SessionError("connectionStatus failed")
        return list(self._cluster.authenticated_users)


class FakeCluster:
    """Users, roles and failure switches for a fake deployment."""

    def __init__(self) -> None:
        self.databases: list[str] = ["admin", "local", "config"]
        self.users: dict[str, dict[str, list[RoleAssignment]]] = {}
        self.roles: dict[str, list[Role]] = {}
        self.authenticated_users: list[str] = []
        self.failing_databases: set[str] = set()
        self.malformed_databases: set[str] = set()
        self.failing_roles: set[str] = set()
        self.fail_open = False
        self.fail_list_databases = False
        self.fail_connection_status = False
        self.opened = 0
        self.closed = 0
        self.users_info_calls: list[str] = []

    def add_user(self, db_name: str, username: str, *roles: tuple[str, str]) -> None:
        """Helper to add a user document: roles are (role, db) pairs."""
        if db_name not in self.databases:
            self.databases.append(db_name)
        self.users.setdefault(db_name, {})[username] = [
            RoleAssignment(role=r, db=d) for r, d in roles
        ]

    def add_role(self, name: str, *actions: str, db: str = "admin", builtin: bool = False) -> Role:
        """Helper to add a role granting actions on a single resource."""
        role = Role(
            name=name,
            db=db,
            is_builtin=builtin,
            privileges=[Privilege(resource={"db": "", "collection": ""}, actions=tuple(actions))],
        )
        self.roles[name] = [role]
        return role

    @asynccontextmanager
    async def session(self) -> AsyncIterator[FakeAdminSession]:
        """AdminSessionFactory: counts opens and closes."""
        if self.fail_open:
            raise SessionError("connection refused")
        self.opened += 1
        try:
            yield FakeAdminSession(self)
        finally:
            self.closed += 1


# --- Fixtures ---


@pytest.fixture(autouse=True)
def log_events():
    """Capture structlog events instead of printing them."""
    with capture_logs() as events:
        yield events


@pytest.fixture
def cluster() -> FakeCluster:
    """Fresh fake cluster for each test."""
    return FakeCluster()


@pytest.fixture
def audited_cluster(cluster: FakeCluster) -> FakeCluster:
    """Cluster where app-user holds readWrite and MyCustomRole on admin."""
    cluster.add_user("admin", "app-user", ("readWrite", "sales"), ("MyCustomRole", "admin"))
    cluster.add_user("sales", "app-user", ("dbOwner", "sales"))
    cluster.add_role("readWrite", *READ_WRITE_ACTIONS, builtin=True)
    cluster.add_role("MyCustomRole", "search")
    cluster.authenticated_users = ["app-user"]
    return cluster
