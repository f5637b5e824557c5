"""Verify permissions use case - required actions vs effective actions."""

import structlog

from mdbiam.application.ports import IdentityResolver
from mdbiam.application.use_cases.roles.expand_role import ExpandRoleUseCase
from mdbiam.application.use_cases.roles.list_user_roles import ListUserRolesUseCase
from mdbiam.domain.entities import PermissionDiff

logger = structlog.get_logger(__name__)


class VerifyPermissionsUseCase:
    """Diff the subject's effective actions against a required list.

    Never raises: any failure is logged and reported as an empty diff, so
    "audit failed" and "zero permissions" look alike here. Callers that need
    to tell them apart should list roles and expand them directly.
    """

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        list_user_roles: ListUserRolesUseCase,
        expand_role: ExpandRoleUseCase,
    ) -> None:
        self._identity_resolver = identity_resolver
        self._list_user_roles = list_user_roles
        self._expand_role = expand_role

    async def execute(
        self,
        required_permissions: list[str],
        role_names: list[str] | None = None,
    ) -> PermissionDiff:
        """Compute extra/missing/present for the given or discovered roles."""
        try:
            if role_names is None:
                username = await self._identity_resolver.resolve()
                role_names = sorted(await self._list_user_roles.execute(username))

            effective: set[str] = set()
            for role_name in role_names:
                effective.update(await self._expand_role.execute(role_name))

            diff = PermissionDiff.compute(required_permissions, effective)
        except Exception as e:
            logger.error("Permission verification failed", error=str(e), exc_info=True)
            return PermissionDiff.empty()

        logger.info(
            "Permissions verified",
            roles=list(role_names),
            extra=len(diff.extra),
            missing=sorted(diff.missing),
            present=len(diff.present),
        )
        return diff
