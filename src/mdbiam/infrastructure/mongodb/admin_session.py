"""MongoDB admin session - pymongo adapter for the AdminSession port."""

from collections.abc import Mapping
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from mdbiam.domain.entities import Privilege, Role, RoleAssignment
from mdbiam.domain.exceptions import SessionError


def _assignments(items: Any) -> list[RoleAssignment]:
    if not isinstance(items, list):
        return []
    return [
        RoleAssignment(role=item["role"], db=item.get("db", ""))
        for item in items
        if isinstance(item, Mapping) and item.get("role")
    ]


def _privileges(items: Any) -> list[Privilege]:
    if not isinstance(items, list):
        return []
    privileges = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        actions = item.get("actions")
        privileges.append(
            Privilege(
                resource=dict(item.get("resource") or {}),
                actions=tuple(a for a in actions if isinstance(a, str))
                if isinstance(actions, list)
                else (),
            )
        )
    return privileges


def role_from_document(doc: Mapping[str, Any]) -> Role:
    """Build Role from a rolesInfo entry."""
    return Role(
        name=doc.get("role", ""),
        db=doc.get("db", ""),
        is_builtin=bool(doc.get("isBuiltin", False)),
        privileges=_privileges(doc.get("privileges")),
        inherited_privileges=_privileges(doc.get("inheritedPrivileges")),
        roles=_assignments(doc.get("roles")),
        inherited_roles=_assignments(doc.get("inheritedRoles")),
    )


class MongoAdminSession:
    """AdminSession over an AsyncMongoClient. Wraps driver errors in SessionError."""

    def __init__(self, client: AsyncMongoClient) -> None:
        self._client = client

    async def list_database_names(self) -> list[str]:
        """listDatabases (names only)."""
        try:
            return await self._client.list_database_names()
        except PyMongoError as e:
            raise SessionError(f"listDatabases failed: {e}") from e

    async def get_user_roles(self, db_name: str, username: str) -> list[RoleAssignment] | None:
        """usersInfo for username on db_name."""
        try:
            result = await self._client[db_name].command("usersInfo", username)
        except PyMongoError as e:
            raise SessionError(f"usersInfo failed on {db_name}: {e}") from e

        users = result.get("users")
        if not isinstance(users, list) or not users:
            return None
        if not isinstance(users[0], Mapping) or "roles" not in users[0]:
            return None
        return _assignments(users[0]["roles"])

    async def get_roles_info(self, role_name: str) -> list[Role]:
        """rolesInfo on admin with privileges and built-in roles."""
        try:
            result = await self._client.admin.command(
                "rolesInfo",
                role_name,
                showPrivileges=True,
                showBuiltinRoles=True,
            )
        except PyMongoError as e:
            raise SessionError(f"rolesInfo failed for {role_name}: {e}") from e

        roles = result.get("roles")
        if not isinstance(roles, list):
            return []
        return [role_from_document(doc) for doc in roles if isinstance(doc, Mapping)]

    async def get_authenticated_users(self) -> list[str]:
        """Users authenticated on this connection, as reported by connectionStatus."""
        try:
            result = await self._client.admin.command("connectionStatus")
        except PyMongoError as e:
            raise SessionError(f"connectionStatus failed: {e}") from e

        auth_info = result.get("authInfo") or {}
        users = auth_info.get("authenticatedUsers") or []
        return [u["user"] for u in users if isinstance(u, Mapping) and u.get("user")]
