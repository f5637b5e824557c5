"""Role manager port - public auditing contract."""

from typing import Protocol

from mdbiam.domain.entities import PermissionDiff


class RoleManager(Protocol):
    """Roles and permissions of a MongoDB user."""

    async def get_username(self, username: str | None = None) -> str: ...

    async def get_user_roles(self, username: str | None = None) -> set[str]: ...

    async def get_privileges_of_role(self, role_name: str) -> set[str]: ...

    async def verify_permissions(
        self,
        required_permissions: list[str],
        role_names: list[str] | None = None,
    ) -> PermissionDiff: ...

    async def check_connection(self) -> None: ...
