"""Expand role use case - role name to flat action set."""

import structlog

from mdbiam.application.ports import AdminSessionFactory

logger = structlog.get_logger(__name__)


class ExpandRoleUseCase:
    """Resolve a role (built-in and inherited included) into action names."""

    def __init__(self, session_factory: AdminSessionFactory) -> None:
        self._session_factory = session_factory

    async def execute(self, role_name: str) -> set[str]:
        """Actions granted by role_name. Empty set if the lookup fails."""
        actions: set[str] = set()
        try:
            async with self._session_factory() as session:
                roles = await session.get_roles_info(role_name)
        except Exception as e:
            logger.warning("Role expansion failed", role=role_name, error=str(e))
            return actions

        for role in roles:
            actions.update(role.all_actions())
        logger.debug("Role expanded", role=role_name, actions=len(actions))
        return actions
