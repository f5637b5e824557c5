"""List user roles use case - aggregate role grants across databases."""

import structlog

from mdbiam.application.ports import AdminSessionFactory
from mdbiam.domain.entities import RoleAssignment
from mdbiam.domain.exceptions import AggregationFailed, MissingSubject, SessionError

logger = structlog.get_logger(__name__)

# Cluster-wide role grants are stored on the admin database.
ADMIN_DATABASE = "admin"


class ListUserRolesUseCase:
    """Collect the subject's role assignments from every visible database."""

    def __init__(self, session_factory: AdminSessionFactory) -> None:
        self._session_factory = session_factory

    async def collect_assignments(self, username: str) -> dict[str, list[RoleAssignment]]:
        """Map database name -> assignments for username, skipping databases without an account.

        Raises AggregationFailed if the session cannot be opened or databases
        cannot be listed.
        """
        if not username:
            raise MissingSubject(
                "Username must be provided or extracted from the connection string."
            )

        assignments: dict[str, list[RoleAssignment]] = {}
        try:
            async with self._session_factory() as session:
                db_names = await session.list_database_names()
                for db_name in db_names:
                    try:
                        roles = await session.get_user_roles(db_name, username)
                    except Exception as e:
                        logger.debug("usersInfo skipped", db=db_name, error=str(e))
                        continue
                    if roles:
                        assignments[db_name] = roles
        except SessionError as e:
            raise AggregationFailed(f"Could not list databases: {e}") from e
        return assignments

    async def execute(self, username: str) -> set[str]:
        """Role names granted to username on the admin database."""
        assignments = await self.collect_assignments(username)
        admin_roles = assignments.get(ADMIN_DATABASE, [])
        roles = {a.role for a in admin_roles if a.role}
        logger.info(
            "User roles aggregated",
            username=username,
            databases=sorted(assignments),
            roles=sorted(roles),
        )
        return roles
