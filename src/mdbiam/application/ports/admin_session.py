"""Admin session port - database-admin queries the auditor depends on."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from mdbiam.domain.entities import Role, RoleAssignment


class AdminSession(Protocol):
    """Open session on one cluster. Driver failures surface as SessionError."""

    async def list_database_names(self) -> list[str]: ...

    async def get_user_roles(self, db_name: str, username: str) -> list[RoleAssignment] | None:
        """Role assignments of username on db_name, None when the user has no account there."""
        ...

    async def get_roles_info(self, role_name: str) -> list[Role]: ...

    async def get_authenticated_users(self) -> list[str]: ...


class AdminSessionFactory(Protocol):
    """Opens a session scoped to one logical operation, closed on every exit path."""

    def __call__(self) -> AbstractAsyncContextManager[AdminSession]: ...
