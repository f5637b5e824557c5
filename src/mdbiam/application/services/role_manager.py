"""Role manager service - one authentication variant composed with the shared use cases."""

from mdbiam.application.ports import AdminSessionFactory, IdentityResolver
from mdbiam.application.use_cases.permission.verify_permissions import (
    VerifyPermissionsUseCase,
)
from mdbiam.application.use_cases.roles.expand_role import ExpandRoleUseCase
from mdbiam.application.use_cases.roles.list_user_roles import ListUserRolesUseCase
from mdbiam.domain.entities import PermissionDiff


class RoleManagerService:
    """RoleManager implementation; variants differ only in their identity resolver."""

    def __init__(
        self,
        session_factory: AdminSessionFactory,
        identity_resolver: IdentityResolver,
    ) -> None:
        self._session_factory = session_factory
        self._identity_resolver = identity_resolver
        self._list_user_roles = ListUserRolesUseCase(session_factory)
        self._expand_role = ExpandRoleUseCase(session_factory)
        self._verify_permissions = VerifyPermissionsUseCase(
            identity_resolver=identity_resolver,
            list_user_roles=self._list_user_roles,
            expand_role=self._expand_role,
        )

    @property
    def identity_resolver(self) -> IdentityResolver:
        return self._identity_resolver

    async def get_username(self, username: str | None = None) -> str:
        return await self._identity_resolver.resolve(username)

    async def get_user_roles(self, username: str | None = None) -> set[str]:
        """Raises MissingSubject, IdentityUnresolved or AggregationFailed."""
        subject = await self._identity_resolver.resolve(username)
        return await self._list_user_roles.execute(subject)

    async def get_privileges_of_role(self, role_name: str) -> set[str]:
        return await self._expand_role.execute(role_name)

    async def verify_permissions(
        self,
        required_permissions: list[str],
        role_names: list[str] | None = None,
    ) -> PermissionDiff:
        return await self._verify_permissions.execute(required_permissions, role_names)

    async def check_connection(self) -> None:
        """Open a session and run connectionStatus. Raises SessionError if unreachable."""
        async with self._session_factory() as session:
            await session.get_authenticated_users()
